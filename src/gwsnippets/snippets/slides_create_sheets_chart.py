"""
Embed a chart from a spreadsheet on a slide.  LINKED means it can be refreshed
from the spreadsheet later.
https://developers.google.com/slides/api/guides/add-chart#add_a_chart_to_a_slide
"""
import logging
import sys

from ..access import gws
from ..slides import ops
from . import run

logger = logging.getLogger(__name__)

SCOPES = ['presentations', 'sheets-ro']

def main(presentation_id: str, page_id: str, spreadsheet_id: str, sheet_chart_id: int|str,
         element_id: str = 'MyEmbeddedChart') -> str:
    gws.append_scopes(SCOPES)
    emu4M = {
        'magnitude': 4000000,
        'unit': 'EMU'
    }
    requests = [
        {
            'createSheetsChart': {
                'objectId': element_id,
                'spreadsheetId': spreadsheet_id,
                'chartId': int(sheet_chart_id),
                'linkingMode': 'LINKED',
                'elementProperties': {
                    'pageObjectId': page_id,
                    'size': {
                        'height': emu4M,
                        'width': emu4M
                    },
                    'transform': {
                        'scaleX': 1,
                        'scaleY': 1,
                        'translateX': 100000,
                        'translateY': 100000,
                        'unit': 'EMU'
                    }
                }
            }
        }
    ]
    response = ops.batchUpdate(presentation_id, {'requests': requests})
    object_id = response.object_id(0, 'createSheetsChart')
    logger.info("Added a linked Sheets chart with ID: %s", object_id)
    return object_id

if __name__ == '__main__':
    run(main, *sys.argv[1:])
