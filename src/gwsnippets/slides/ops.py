from dataclasses import asdict, is_dataclass
from functools import partial
import logging

from .resources import *
from .requests import *

from ..access import require_service

logger = logging.getLogger(__name__)

# do this as module level or a parent class instance?
# simpler at module level and achieves the same thing
_get_service = partial(require_service, "slides", "v1")

def create(presentation: Presentation|dict|str) -> Presentation:
    """
    Wrapper for calling the create() presentations method.
    See https://developers.google.com/slides/api/reference/rest/v1/presentations/create
    A plain string is taken as the title, which is all create() really looks at,
    the new presentation gets a single blank slide.
    """
    if isinstance(presentation, str):
        presentation = Presentation(title=presentation)
    body = presentation.trim() if isinstance(presentation, Presentation) else asdict(presentation) if is_dataclass(presentation) else presentation
    response = _get_service().presentations().create(body=body).execute()
    if response:
        p = Presentation.from_dict(response)
        logger.info("created presentation %s", p.presentationId)
        return p
    return Presentation()

def get(presentationId: str) -> Presentation:
    """
    Wrapper for calling the get() presentations method.
    See https://developers.google.com/slides/api/reference/rest/v1/presentations/get
    """
    if not presentationId:
        return Presentation()
    response = _get_service().presentations().get(presentationId=presentationId).execute()
    return Presentation.from_dict(response) if response else Presentation()

def batchUpdate(presentationId: str, request: GoogleSlidesUpdateRequest|dict) -> GoogleSlidesUpdateRequestResponse:
    """
    Wrapper for calling the batchUpdate() presentations method.
    See https://developers.google.com/slides/api/reference/rest/v1/presentations/batchUpdate
    Everything that changes a presentation after creation goes through here.
    """
    body = request.to_base() if isinstance(request, GoogleSlidesUpdateRequest) else request
    logger.debug("presentation %s batchUpdate with %d requests", presentationId, len(body.get('requests', [])))
    response = _get_service().presentations().batchUpdate(presentationId=presentationId, body=body).execute()
    if response:
        return GoogleSlidesUpdateRequestResponse.from_dict(response)
    return GoogleSlidesUpdateRequestResponse()
