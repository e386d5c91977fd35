"""
Standalone samples, one remote call each.  Run with e.g.
python -m gwsnippets.snippets.slides_create_presentation
"""
import logging
import sys

from googleapiclient.errors import HttpError

from ..access import GWSAccessError

def run(main, *args) -> None:
    """
    Top level for the snippet scripts: log to the console, run main() and
    log anything that comes back from the API before exiting non-zero.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    logger = logging.getLogger(main.__module__)
    try:
        main(*args)
    except (HttpError, GWSAccessError) as e:
        logger.error("%s failed: %s", main.__module__, e)
        sys.exit(1)
