from dataclasses import dataclass, field
from typing import Any, List

from ..resources import GoogleWorkSpaceResourceBase, GoogleWorkSpaceRequestBase
from .resources import *

# the request key comes from the class name via to_request(), so name new ones <Name>Request

@dataclass
class CreateSlideRequest(GoogleWorkSpaceRequestBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations/request#createsliderequest
    No insertionIndex means append to the end.
    """
    objectId: str|None = field(default=None)
    insertionIndex: int|None = field(default=None)
    slideLayoutReference: LayoutReference|dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if self.slideLayoutReference is not None and not isinstance(self.slideLayoutReference, LayoutReference):
            self.slideLayoutReference = LayoutReference(**dict(self.slideLayoutReference))

@dataclass
class CreateShapeRequest(GoogleWorkSpaceRequestBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations/request#createshaperequest
    """
    shapeType: str
    elementProperties: PageElementProperties|dict
    objectId: str|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        s = GoogleSlidesEnum.shapeType(self.shapeType)
        if not s:
            raise ValueError(f"Invalid shape type: {self.shapeType}")
        self.shapeType = s
        if not isinstance(self.elementProperties, PageElementProperties):
            self.elementProperties = PageElementProperties(**dict(self.elementProperties))

    def to_base(self) -> dict:
        # keep the key order the API docs use
        self.fixup()
        return {'objectId': self.objectId, 'shapeType': self.shapeType,
                'elementProperties': self.elementProperties.to_base()}

@dataclass
class InsertTextRequest(GoogleWorkSpaceRequestBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations/request#inserttextrequest
    cellLocation only applies when the target is a table.
    """
    objectId: str
    text: str
    insertionIndex: int|None = field(default=None)
    cellLocation: dict|None = field(default=None)

    def fixup(self) -> None:
        if self.insertionIndex is not None and self.insertionIndex < 0:
            raise ValueError(f"insertionIndex must be >= 0 not: {self.insertionIndex}")

@dataclass
class CreateSheetsChartRequest(GoogleWorkSpaceRequestBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations/request#createsheetschartrequest
    LINKED charts can be refreshed from the spreadsheet later, NOT_LINKED_IMAGE is a snapshot.
    """
    spreadsheetId: str
    chartId: int
    elementProperties: PageElementProperties|dict
    objectId: str|None = field(default=None)
    linkingMode: str = field(default="LINKED")

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        m = GoogleSlidesEnum.linkingMode(self.linkingMode)
        if not m:
            raise ValueError(f"Invalid linking mode: {self.linkingMode}")
        self.linkingMode = m
        if not isinstance(self.elementProperties, PageElementProperties):
            self.elementProperties = PageElementProperties(**dict(self.elementProperties))

@dataclass
class GoogleSlidesUpdateRequest(GoogleWorkSpaceResourceBase):
    """
    Generate a Slides Batch Update request body.
    https://developers.google.com/slides/api/reference/rest/v1/presentations/batchUpdate#request-body
    The requests are applied in order and atomically, if one fails none are applied.
    """
    requests: List[GoogleWorkSpaceRequestBase|dict]
    writeControl: dict|None = field(default=None)

    def to_base(self) -> dict:
        b = {'requests': [r.to_request() if isinstance(r, GoogleWorkSpaceRequestBase) else r
                          for r in self.requests]}
        if self.writeControl:
            b['writeControl'] = self.writeControl
        return b

@dataclass
class GoogleSlidesUpdateRequestResponse(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations/batchUpdate#response-body
    One reply per request, in the same order.  Requests with nothing to say get an empty reply.
    """
    presentationId: str = field(default="")
    replies: List[dict] = field(default_factory=list)
    writeControl: dict = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.presentationId)

    def __len__(self) -> int:
        return len(self.replies)

    def reply(self, index: int, kind: str) -> dict:
        """
        Pull out a reply payload, e.g. reply(0, 'createShape') -> {'objectId': ...}
        """
        if not 0 <= index < len(self.replies):
            raise IndexError(f"No reply {index}, only {len(self.replies)} replies")
        r = self.replies[index]
        if kind not in r:
            raise KeyError(f"Reply {index} is not a {kind} reply: {list(r.keys())}")
        return r[kind]

    def object_id(self, index: int, kind: str) -> Any:
        """The objectId of a create* reply, which is usually all the caller wants."""
        return self.reply(index, kind).get('objectId')
