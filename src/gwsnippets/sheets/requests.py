from dataclasses import dataclass, field
from typing import List

from ..resources import GoogleWorkSpaceResourceBase, GoogleWorkSpaceRequestBase
from .resources import *

# need to add request here and pull the name out via self.__class__.__name__

@dataclass
class RepeatCellRequest(GoogleWorkSpaceRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#repeatcellrequest
    Write the same cell to every cell in the range.  fields is the mask of which
    parts of the cell to write, e.g. 'userEnteredValue', '*' is everything.
    """
    range: GridRange|dict
    cell: CellData|dict
    fields: str = field(default="userEnteredValue")

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.range = self.range if isinstance(self.range, GridRange) else GridRange(**dict(self.range))
        self.cell = self.cell if isinstance(self.cell, CellData) else CellData(**dict(self.cell))
        if not self.fields:
            raise ValueError("RepeatCellRequest needs a fields mask")

@dataclass
class GoogleSheetsUpdateRequest(GoogleWorkSpaceResourceBase):
    """
    Generate a GSheet Batch Update request body.
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#request-body
    """
    requests: List[GoogleWorkSpaceRequestBase|dict]
    includeSpreadsheetInResponse: bool = field(default=False)
    responseRanges: List[str] = field(default_factory=list)
    responseIncludeGridData: bool = field(default=False)

    def to_base(self) -> dict:
        b = {'requests': [r.to_request() if isinstance(r, GoogleWorkSpaceRequestBase) else r
                          for r in self.requests]}
        # the rest only matter if asked for
        if self.includeSpreadsheetInResponse:
            b['includeSpreadsheetInResponse'] = True
            if self.responseRanges:
                b['responseRanges'] = list(self.responseRanges)
            if self.responseIncludeGridData:
                b['responseIncludeGridData'] = True
        return b

@dataclass
class GoogleSheetsUpdateRequestResponse(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#response-body
    """
    spreadsheetId: str = field(default="")
    replies: List[dict] = field(default_factory=list)
    updatedSpreadsheet: Spreadsheet|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def fixup(self) -> None:
        self.updatedSpreadsheet = self.updatedSpreadsheet if isinstance(self.updatedSpreadsheet,Spreadsheet) else Spreadsheet.from_dict(self.updatedSpreadsheet)
