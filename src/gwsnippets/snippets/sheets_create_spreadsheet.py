"""
Create a new spreadsheet, only asking for its ID back.
https://developers.google.com/sheets/api/guides/create#create_a_blank_spreadsheet
"""
import logging
import sys

from ..access import gws
from ..sheets import ops
from . import run

logger = logging.getLogger(__name__)

SCOPES = ['sheets']

def main(title: str = 'Title') -> str:
    gws.append_scopes(SCOPES)
    spreadsheet = {
        'properties': {
            'title': title
        }
    }
    response = ops.create(spreadsheet, fields='spreadsheetId')
    logger.info("Spreadsheet ID: %s", response.spreadsheetId)
    return response.spreadsheetId

if __name__ == '__main__':
    run(main, *sys.argv[1:])
