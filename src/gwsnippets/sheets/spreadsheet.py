from typing import Self

from .resources import *
from .requests import *
from . import ops

class GoogleSpreadSheet():
    """
    Class representation of a spreadsheet, the whole file rather than one of its sheets.
    Cell writes that go through batchUpdate can be chained with updateRequests().
    """
    def __init__(self, spreadsheet: Spreadsheet|dict|str = "") -> None:
        self._spreadsheet = (Spreadsheet(spreadsheetId=spreadsheet) if isinstance(spreadsheet, str) else
                             spreadsheet if isinstance(spreadsheet, Spreadsheet) else
                             Spreadsheet.from_dict(spreadsheet))

    def __bool__(self) -> bool:
        return bool(self._spreadsheet)

    def __str__(self) -> str:
        return str(self._spreadsheet)

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    def __len__(self) -> int:
        """
        In this context length is the number of sheets in this spreadsheet.
        Or 0 if unconnected,
        """
        return len(self._spreadsheet.sheets)

    @property
    def id(self) -> str:
        return self._spreadsheet.spreadsheetId

    @property
    def spreadsheet(self) -> Spreadsheet:
        return self._spreadsheet

    @property
    def title(self) -> str:
        if self._spreadsheet and self._spreadsheet.properties:
            return self._spreadsheet.properties.title
        return 'unconnected'

    @staticmethod
    def create(spreadsheet: Spreadsheet|dict|str, fields: str|None = None) -> Self:
        return GoogleSpreadSheet(ops.create(spreadsheet, fields))

    def batchUpdate(self, request: GoogleSheetsUpdateRequest|dict) -> GoogleSheetsUpdateRequestResponse:
        if not self:
            raise ValueError("Must be a valid spreadsheet for an update operation")
        response = ops.batchUpdate(self.id, request)
        if response and response.updatedSpreadsheet:
            self._spreadsheet = response.updatedSpreadsheet
        return response

    def updateRequests(self):
        """
        Start a batchUpdate() chain, makes it easy to append operations to pack
        into a request before sending it.
        """
        return _SpreadsheetUpdateChain(self)

class _SpreadsheetUpdateChain():
    """
    Utility class for building up a chain of update requests.
    The spreadsheet batchUpdate method can take a list of requests at once
    and it is more efficient to provide a number of them at once rather than
    request/response/request/response/etc.  So this provides a means to add
    a chain of requests and then terminate with execute().
    response = spreadsheet.updateRequests().repeatCell(params).execute()
    """
    def __init__(self, spreadsheet: GoogleSpreadSheet) -> None:
        if not spreadsheet:
            raise ValueError("Must be a valid spreadsheet for an update operation")
        self._spreadsheet = spreadsheet
        self._requests = []

    def __len__(self) -> int:
        return len(self._requests)

    def execute(self, includeSpreadsheetInResponse: bool = False) -> GoogleSheetsUpdateRequestResponse:
        """
        Terminate a request chain and send the actual batchUpdate
        """
        if self._requests:
            request = GoogleSheetsUpdateRequest(self._requests, includeSpreadsheetInResponse)
            return self._spreadsheet.batchUpdate(request)
        return GoogleSheetsUpdateRequestResponse(self._spreadsheet.id)

    def repeatCell(self, range: GridRange|dict,
                   value: bool|int|float|str,
                   fields: str = "userEnteredValue") -> Self:
        """
        Set every cell in the range to value.
        https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#repeatcellrequest
        """
        self._requests.append(RepeatCellRequest(range, CellData(ExtendedValue.of(value)), fields))
        return self
