from dataclasses import asdict, is_dataclass
from functools import partial
import logging

from .resources import *
from .requests import *

from ..access import require_service

logger = logging.getLogger(__name__)

# do this as module level or a parent class instance?
# simpler at module level and achieves the same thing
_get_service = partial(require_service, "sheets", "v4")

def create(spreadsheet: Spreadsheet|dict|str, fields: str|None = None) -> Spreadsheet:
    """
    Wrapper for calling the create() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/create
    This is for creating a whole new spreadsheet instance, not a sheet within a
    spreadsheet.  A plain string is taken as the title.
    fields is the partial response mask, e.g. 'spreadsheetId' if that is all
    you are after.
    """
    if isinstance(spreadsheet, str):
        spreadsheet = Spreadsheet(properties=SpreadsheetProperties(title=spreadsheet))
    body = spreadsheet.create_body() if isinstance(spreadsheet,Spreadsheet) else asdict(spreadsheet) if is_dataclass(spreadsheet) else spreadsheet
    args = {'body': body}
    if fields:
        args['fields'] = fields
    response = _get_service().spreadsheets().create(**args).execute()
    if response:
        s = Spreadsheet.from_dict(response)
        logger.info("created spreadsheet %s", s.spreadsheetId)
        return s
    return Spreadsheet()

def batchUpdate(spreadsheetid: str, request: GoogleSheetsUpdateRequest|dict) -> GoogleSheetsUpdateRequestResponse:
    """
    Wrapper for calling the batchUpdate() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate
    This is for altering any spreadsheet properties, and cells via requests like repeatCell.
    """
    body = request.to_base() if isinstance(request, GoogleSheetsUpdateRequest) else request
    logger.debug("spreadsheet %s batchUpdate with %d requests", spreadsheetid, len(body.get('requests', [])))
    response = _get_service().spreadsheets().batchUpdate(spreadsheetId=spreadsheetid, body=body).execute()
    if response:
        return GoogleSheetsUpdateRequestResponse.from_dict(response)
    return GoogleSheetsUpdateRequestResponse()
