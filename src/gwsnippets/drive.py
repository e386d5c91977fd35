import logging

from googleapiclient.discovery import Resource
import google_auth_httplib2

from .access import service

logger = logging.getLogger(__name__)

@service("drive", "v3")
def delete(fileId: str, http: google_auth_httplib2.AuthorizedHttp|None = None,
           service: Resource = None) -> None:
    """
    https://developers.google.com/drive/api/reference/rest/v3/files/delete
    Permanently delete a file, skipping the trash.  Presentations and spreadsheets
    are Drive files so this is how the helpers get rid of them.
    Pass http when calling from a worker thread, the service's own transport is
    not thread safe.  Pass service too so the thread doesn't go back to gws for it.
    """
    if not fileId:
        raise ValueError("delete() needs a fileId")
    service.files().delete(fileId=fileId).execute(http=http)
    logger.info("deleted drive file %s", fileId)
