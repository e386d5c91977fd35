import logging

import httplib2
import pytest
from googleapiclient.errors import HttpError

from gwsnippets.access import gws, GWSAccessError
from gwsnippets.snippets import run
from gwsnippets.snippets import (chat_update_membership_user_cred,
                                 sheets_create_spreadsheet,
                                 slides_create_presentation,
                                 slides_create_sheets_chart,
                                 slides_create_textbox_with_text)

def test_chat_update_membership(chat_service):
    members = chat_service.spaces.return_value.members.return_value
    name = 'spaces/AAAA/members/1234'
    members.patch.return_value.execute.return_value = {'name': name, 'role': 'ROLE_MANAGER'}
    m = chat_update_membership_user_cred.main(name, 'ROLE_MANAGER')
    members.patch.assert_called_once_with(name=name, updateMask='role', body={'role': 'ROLE_MANAGER'})
    assert(m.role == 'ROLE_MANAGER')
    assert(gws.get_scope('chat-memberships') in gws.scopes)

def test_slides_create_presentation(slides_service):
    presentations = slides_service.presentations.return_value
    presentations.create.return_value.execute.return_value = {'presentationId': 'preso'}
    assert(slides_create_presentation.main('My Deck') == 'preso')
    presentations.create.assert_called_once_with(body={'title': 'My Deck'})

def test_slides_create_textbox(slides_service):
    presentations = slides_service.presentations.return_value
    presentations.batchUpdate.return_value.execute.return_value = {
        'presentationId': 'preso',
        'replies': [{'createShape': {'objectId': 'MyTextBox_10'}}, {}]
    }
    assert(slides_create_textbox_with_text.main('preso', 'page') == 'MyTextBox_10')
    body = presentations.batchUpdate.call_args.kwargs['body']
    assert(body['requests'][0]['createShape']['elementProperties']['pageObjectId'] == 'page')
    assert(body['requests'][1]['insertText']['objectId'] == 'MyTextBox_10')

def test_slides_create_sheets_chart(slides_service):
    presentations = slides_service.presentations.return_value
    presentations.batchUpdate.return_value.execute.return_value = {
        'presentationId': 'preso',
        'replies': [{'createSheetsChart': {'objectId': 'MyEmbeddedChart'}}]
    }
    # from the command line the chart id arrives as a string
    assert(slides_create_sheets_chart.main('preso', 'page', 'ss', '99') == 'MyEmbeddedChart')
    request = presentations.batchUpdate.call_args.kwargs['body']['requests'][0]['createSheetsChart']
    assert(request['chartId'] == 99)
    assert(request['linkingMode'] == 'LINKED')

def test_sheets_create_spreadsheet(sheets_service):
    spreadsheets = sheets_service.spreadsheets.return_value
    spreadsheets.create.return_value.execute.return_value = {'spreadsheetId': 'ss'}
    assert(sheets_create_spreadsheet.main('Budget') == 'ss')
    spreadsheets.create.assert_called_once_with(body={'properties': {'title': 'Budget'}},
                                                fields='spreadsheetId')

def test_run_logs_api_errors(caplog):
    def main():
        raise HttpError(httplib2.Response({'status': 403}), b'Forbidden')
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as e:
            run(main)
    assert(e.value.code == 1)
    assert("failed" in caplog.text)

def test_run_logs_access_errors():
    def main():
        raise GWSAccessError("no creds")
    with pytest.raises(SystemExit):
        run(main)

def test_run_passes_other_errors():
    def main():
        raise KeyError("bug")
    with pytest.raises(KeyError):
        run(main)
