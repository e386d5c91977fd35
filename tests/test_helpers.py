import asyncio
import threading
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from gwsnippets.access import gws, GWSAccessError
from gwsnippets.helpers import Helpers

@pytest.fixture
def helpers(services):
    return Helpers()

def test_init_scopes(helpers):
    assert(helpers.files_to_delete == [])
    for s in ["drive", "presentations", "sheets"]:
        assert(gws.get_scope(s) in gws.scopes)

def test_reset(helpers):
    helpers.delete_file_on_cleanup('a')
    helpers.delete_file_on_cleanup('b')
    assert(helpers.files_to_delete == ['a', 'b'])
    helpers.reset()
    assert(helpers.files_to_delete == [])

def test_create_test_presentation(helpers, slides_service):
    presentations = slides_service.presentations.return_value
    presentations.create.return_value.execute.return_value = {'presentationId': 'preso'}
    assert(helpers.create_test_presentation() == 'preso')
    presentations.create.assert_called_once_with(body={'title': 'Test Preso'})
    assert(helpers.files_to_delete == ['preso'])

def test_add_slides(helpers, slides_service):
    presentations = slides_service.presentations.return_value
    presentations.batchUpdate.return_value.execute.return_value = {'presentationId': 'preso', 'replies': []}
    ids = helpers.add_slides('preso', 3, 'TITLE_AND_TWO_COLUMNS')
    assert(ids == ['slide_0', 'slide_1', 'slide_2'])
    presentations.batchUpdate.assert_called_once_with(presentationId='preso', body={'requests': [
        {'createSlide': {'objectId': f'slide_{i}',
                         'slideLayoutReference': {'predefinedLayout': 'TITLE_AND_TWO_COLUMNS'}}}
        for i in range(3)
    ]})
    # slides live inside the presentation, nothing extra to delete
    assert(helpers.files_to_delete == [])

def test_create_test_textbox(helpers, slides_service):
    presentations = slides_service.presentations.return_value
    presentations.batchUpdate.return_value.execute.return_value = {
        'presentationId': 'preso',
        'replies': [{'createShape': {'objectId': 'MyTextBox_01'}}, {}]
    }
    assert(helpers.create_test_textbox('preso', 'slide_0') == 'MyTextBox_01')
    pt350 = {'magnitude': 350, 'unit': 'PT'}
    presentations.batchUpdate.assert_called_once_with(presentationId='preso', body={'requests': [{
        'createShape': {
            'objectId': 'MyTextBox_01',
            'shapeType': 'TEXT_BOX',
            'elementProperties': {
                'pageObjectId': 'slide_0',
                'size': {'height': pt350, 'width': pt350},
                'transform': {'scaleX': 1, 'scaleY': 1, 'translateX': 350,
                              'translateY': 100, 'unit': 'PT'}
            }
        }
    }, {
        'insertText': {'objectId': 'MyTextBox_01', 'insertionIndex': 0, 'text': 'New Box Text Inserted'}
    }]})

def test_create_test_sheets_chart(helpers, slides_service):
    presentations = slides_service.presentations.return_value
    presentations.batchUpdate.return_value.execute.return_value = {
        'presentationId': 'preso',
        'replies': [{'createSheetsChart': {'objectId': 'MyChart_01'}}]
    }
    assert(helpers.create_test_sheets_chart('preso', 'slide_0', 'ss', 1234) == 'MyChart_01')
    emu4M = {'magnitude': 4000000, 'unit': 'EMU'}
    presentations.batchUpdate.assert_called_once_with(presentationId='preso', body={'requests': [{
        'createSheetsChart': {
            'objectId': 'MyChart_01',
            'spreadsheetId': 'ss',
            'chartId': 1234,
            'linkingMode': 'LINKED',
            'elementProperties': {
                'pageObjectId': 'slide_0',
                'size': {'height': emu4M, 'width': emu4M},
                'transform': {'scaleX': 1, 'scaleY': 1, 'translateX': 100000,
                              'translateY': 100000, 'unit': 'EMU'}
            }
        }
    }]})

def test_create_test_spreadsheet(helpers, sheets_service):
    spreadsheets = sheets_service.spreadsheets.return_value
    spreadsheets.create.return_value.execute.return_value = {'spreadsheetId': 'ss'}
    assert(helpers.create_test_spreadsheet() == 'ss')
    spreadsheets.create.assert_called_once_with(body={'properties': {'title': 'Test Spreadsheet'}},
                                                fields='spreadsheetId')
    assert(helpers.files_to_delete == ['ss'])

def test_populate_values(helpers, sheets_service):
    spreadsheets = sheets_service.spreadsheets.return_value
    spreadsheets.batchUpdate.return_value.execute.return_value = {'spreadsheetId': 'ss', 'replies': [{}]}
    assert(helpers.populate_values('ss') == 'ss')
    spreadsheets.batchUpdate.assert_called_once_with(spreadsheetId='ss', body={'requests': [{
        'repeatCell': {
            'range': {'sheetId': 0, 'startRowIndex': 0, 'endRowIndex': 15,
                      'startColumnIndex': 0, 'endColumnIndex': 15},
            'cell': {'userEnteredValue': {'stringValue': 'Hello'}},
            'fields': 'userEnteredValue'
        }
    }]})

def test_cleanup_nothing(helpers, drive_service):
    asyncio.run(helpers.cleanup())
    drive_service.files.assert_not_called()

def test_cleanup_concurrent(helpers, drive_service):
    ids = ['a', 'b', 'c']
    for i in ids:
        helpers.delete_file_on_cleanup(i)
    # every delete has to be in flight at once to get through the barrier
    barrier = threading.Barrier(len(ids), timeout=5)
    drive_service.files.return_value.delete.return_value.execute.side_effect = lambda http=None: barrier.wait()
    asyncio.run(helpers.cleanup())
    deleted = sorted(c.kwargs['fileId'] for c in drive_service.files.return_value.delete.call_args_list)
    assert(deleted == ids)
    # each delete gets its own transport
    https = [c.kwargs['http'] for c in drive_service.files.return_value.delete.return_value.execute.call_args_list]
    assert(len(set(id(h) for h in https)) == len(ids))
    assert(helpers.files_to_delete == [])

def test_cleanup_error(helpers, drive_service):
    helpers.delete_file_on_cleanup('gone')
    helpers.delete_file_on_cleanup('there')
    ok = MagicMock()
    missing = MagicMock()
    missing.execute.side_effect = HttpError(httplib2.Response({'status': 404}), b'File not found')
    drive_service.files.return_value.delete.side_effect = lambda fileId: missing if fileId == 'gone' else ok
    with pytest.raises(HttpError):
        asyncio.run(helpers.cleanup())
    # the other delete still went out
    ok.execute.assert_called_once()
    assert(helpers.files_to_delete == [])

def test_cleanup_keeps_workers_off_gws(helpers, drive_service, monkeypatch):
    for i in ['a', 'b', 'c']:
        helpers.delete_file_on_cleanup(i)
    lookups = []
    get_service = gws.get_service
    def recording_get_service(name, version):
        lookups.append(threading.get_ident())
        return get_service(name, version)
    monkeypatch.setattr(gws, "get_service", recording_get_service)
    asyncio.run(helpers.cleanup())
    assert(drive_service.files.return_value.delete.call_count == 3)
    # one lookup, made before any worker started
    assert(lookups == [threading.get_ident()])

def test_cleanup_not_connected(helpers, drive_service, monkeypatch):
    helpers.delete_file_on_cleanup('a')
    helpers.delete_file_on_cleanup('b')
    def no_http():
        raise GWSAccessError("Not connected to Google Work Space")
    monkeypatch.setattr(gws, "new_http", no_http)
    with pytest.raises(GWSAccessError):
        asyncio.run(helpers.cleanup())
    drive_service.files.assert_not_called()
    # nothing went out so the files are still tracked
    assert(helpers.files_to_delete == ['a', 'b'])
