"""
Helper for the snippet tests that need real files to work against.
Everything created through here is a Drive file (presentations and spreadsheets are)
and is remembered so cleanup() can delete it all again at the end of a run.
"""
from typing import List
import asyncio
import logging

from .access import gws, require_service
from . import drive
from .slides import GoogleSlidesPresentation, Size, AffineTransform
from .sheets import GoogleSpreadSheet, GridRange

logger = logging.getLogger(__name__)

class Helpers():
    """
    Creates the throwaway presentations, slides, shapes and spreadsheets the
    snippets need and tracks the files for deletion.
    """
    TEST_PRESENTATION_TITLE = 'Test Preso'
    TEST_SPREADSHEET_TITLE = 'Test Spreadsheet'
    TEXTBOX_ID = 'MyTextBox_01'
    TEXTBOX_TEXT = 'New Box Text Inserted'
    CHART_ID = 'MyChart_01'

    def __init__(self) -> None:
        gws.append_scopes("drive", "presentations", "sheets")
        self.files_to_delete: List[str] = []

    def reset(self) -> None:
        """Forget any tracked files without deleting them."""
        self.files_to_delete = []

    def delete_file_on_cleanup(self, id: str) -> None:
        self.files_to_delete.append(id)

    async def cleanup(self) -> None:
        """
        Delete every tracked file.  The deletes go out concurrently, each from a worker
        thread with its own transport, so this takes as long as the slowest one.
        All the deletes are waited on, then the first failure (if any) is raised.
        """
        if not self.files_to_delete:
            return
        # the service and transports come from this thread, the workers never touch gws
        drive_service = require_service("drive", "v3")
        https = [gws.new_http() for _ in self.files_to_delete]
        file_ids, self.files_to_delete = self.files_to_delete, []
        results = await asyncio.gather(*[asyncio.to_thread(drive.delete, file_id, http=http,
                                                           service=drive_service)
                                         for file_id, http in zip(file_ids, https)],
                                       return_exceptions=True)
        errors = [r for r in results if isinstance(r, BaseException)]
        if errors:
            logger.error("cleanup failed for %d of %d files", len(errors), len(file_ids))
            raise errors[0]

    def create_test_presentation(self) -> str:
        """
        Creates an empty presentation.
        Returns the presentation ID.
        """
        presentation = GoogleSlidesPresentation.create(self.TEST_PRESENTATION_TITLE)
        self.delete_file_on_cleanup(presentation.id)
        return presentation.id

    def add_slides(self, presentation_id: str, num: int, predefined_layout: str) -> List[str]:
        """
        Adds num slides with the given predefined layout, ids are slide_0, slide_1...
        Returns the list of slide ids.
        """
        slide_ids = [f"slide_{i}" for i in range(num)]
        chain = GoogleSlidesPresentation(presentation_id).updateRequests()
        for slide_id in slide_ids:
            chain.createSlide(slide_id, predefined_layout)
        chain.execute()
        return slide_ids

    def create_test_textbox(self, presentation_id: str, page_object_id: str) -> str:
        """
        Creates a 350pt square textbox on the page and puts some text in it.
        Returns the textbox's object ID.
        """
        response = (GoogleSlidesPresentation(presentation_id).updateRequests()
                    .createShape('TEXT_BOX', page_object_id,
                                 Size.square(350, 'PT'),
                                 AffineTransform(scaleX=1, scaleY=1, translateX=350, translateY=100, unit='PT'),
                                 objectId=self.TEXTBOX_ID)
                    .insertText(self.TEXTBOX_ID, self.TEXTBOX_TEXT, 0)
                    .execute())
        return response.object_id(0, 'createShape')

    def create_test_sheets_chart(self, presentation_id: str, page_id: str,
                                 spreadsheet_id: str, sheet_chart_id: int) -> str:
        """
        Embeds a linked chart from the spreadsheet on the page.
        Returns the chart's object ID.
        """
        response = (GoogleSlidesPresentation(presentation_id).updateRequests()
                    .createSheetsChart(spreadsheet_id, sheet_chart_id, page_id,
                                       Size.square(4000000, 'EMU'),
                                       AffineTransform(scaleX=1, scaleY=1, translateX=100000, translateY=100000, unit='EMU'),
                                       linkingMode='LINKED',
                                       objectId=self.CHART_ID)
                    .execute())
        return response.object_id(0, 'createSheetsChart')

    def create_test_spreadsheet(self) -> str:
        """
        Creates an empty spreadsheet, only asking for the ID back.
        Returns the spreadsheet ID.
        """
        spreadsheet = GoogleSpreadSheet.create(self.TEST_SPREADSHEET_TITLE, fields='spreadsheetId')
        self.delete_file_on_cleanup(spreadsheet.id)
        return spreadsheet.id

    def populate_values(self, spreadsheet_id: str) -> str:
        """
        Fills the top left 15x15 block of the first sheet with 'Hello'.
        Returns the spreadsheet ID.
        """
        (GoogleSpreadSheet(spreadsheet_id).updateRequests()
            .repeatCell(GridRange(sheetId=0, startRowIndex=0, endRowIndex=15,
                                  startColumnIndex=0, endColumnIndex=15),
                        'Hello')
            .execute())
        return spreadsheet_id
