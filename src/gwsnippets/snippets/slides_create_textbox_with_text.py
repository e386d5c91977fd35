"""
Add a textbox to a slide and put some text in it, both in the one batchUpdate.
https://developers.google.com/slides/api/guides/add-shape#example
"""
import logging
import sys

from ..access import gws
from ..slides import ops
from . import run

logger = logging.getLogger(__name__)

SCOPES = ['presentations']

def main(presentation_id: str, page_id: str, element_id: str = 'MyTextBox_10') -> str:
    gws.append_scopes(SCOPES)
    pt350 = {
        'magnitude': 350,
        'unit': 'PT'
    }
    requests = [
        {
            'createShape': {
                'objectId': element_id,
                'shapeType': 'TEXT_BOX',
                'elementProperties': {
                    'pageObjectId': page_id,
                    'size': {
                        'height': pt350,
                        'width': pt350
                    },
                    'transform': {
                        'scaleX': 1,
                        'scaleY': 1,
                        'translateX': 350,
                        'translateY': 100,
                        'unit': 'PT'
                    }
                }
            }
        },
        # Insert text into the box, using the supplied element ID.
        {
            'insertText': {
                'objectId': element_id,
                'insertionIndex': 0,
                'text': 'New Box Text Inserted!'
            }
        }
    ]
    response = ops.batchUpdate(presentation_id, {'requests': requests})
    object_id = response.object_id(0, 'createShape')
    logger.info("Created textbox with ID: %s", object_id)
    return object_id

if __name__ == '__main__':
    run(main, *sys.argv[1:])
