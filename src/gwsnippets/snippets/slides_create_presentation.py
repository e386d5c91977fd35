"""
Create a new, empty presentation.
https://developers.google.com/slides/api/guides/presentations#create_a_presentation
"""
import logging
import sys

from ..access import gws
from ..slides import ops
from . import run

logger = logging.getLogger(__name__)

SCOPES = ['presentations']

def main(title: str = 'Title') -> str:
    gws.append_scopes(SCOPES)
    body = {'title': title}
    presentation = ops.create(body)
    logger.info("Created presentation with ID: %s", presentation.presentationId)
    return presentation.presentationId

if __name__ == '__main__':
    run(main, *sys.argv[1:])
