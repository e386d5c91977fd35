from typing import Self

from .resources import *
from .requests import *
from . import ops

class GoogleSlidesPresentation():
    """
    Class representation of a presentation.  Mostly a holder for the presentationId
    so requests can be chained up against it with updateRequests().
    """
    def __init__(self, presentation: Presentation|dict|str = "") -> None:
        self._presentation = (Presentation(presentationId=presentation) if isinstance(presentation, str) else
                              presentation if isinstance(presentation, Presentation) else
                              Presentation.from_dict(presentation))

    def __bool__(self) -> bool:
        return bool(self._presentation)

    def __str__(self) -> str:
        return str(self._presentation)

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    def __len__(self) -> int:
        """
        In this context length is the number of slides we know about.
        Only as current as the last create()/get()
        """
        return len(self._presentation.slides)

    @property
    def id(self) -> str:
        return self._presentation.presentationId

    @property
    def presentation(self) -> Presentation:
        return self._presentation

    @property
    def title(self) -> str:
        if self._presentation:
            return self._presentation.title
        return 'unconnected'

    @staticmethod
    def create(title: str) -> Self:
        return GoogleSlidesPresentation(ops.create(title))

    def get(self) -> Presentation:
        presentation = ops.get(self.id)
        if presentation:
            self._presentation = presentation
        return presentation

    def batchUpdate(self, request: GoogleSlidesUpdateRequest|dict) -> GoogleSlidesUpdateRequestResponse:
        if not self:
            raise ValueError("Must be a valid presentation for an update operation")
        return ops.batchUpdate(self.id, request)

    def updateRequests(self):
        """
        Start a batchUpdate() chain, makes it easy to append operations to pack
        into a request before sending it.
        """
        return _PresentationUpdateChain(self)

class _PresentationUpdateChain():
    """
    Utility class for building up a chain of update requests.
    The presentations batchUpdate method takes a list of requests which are applied
    in order, so a new shape can be created and filled with text in the one call.
    response = presentation.updateRequests().createShape(...).insertText(...).execute()
    The replies in the response line up with the order of the chain.
    """
    def __init__(self, presentation: GoogleSlidesPresentation) -> None:
        if not presentation:
            raise ValueError("Must be a valid presentation for an update operation")
        self._presentation = presentation
        self._requests = []

    def __len__(self) -> int:
        return len(self._requests)

    def execute(self, writeControl: dict|None = None) -> GoogleSlidesUpdateRequestResponse:
        """
        Terminate a request chain and send the actual batchUpdate
        """
        if self._requests:
            return self._presentation.batchUpdate(GoogleSlidesUpdateRequest(self._requests, writeControl))
        return GoogleSlidesUpdateRequestResponse(self._presentation.id)

    def createSlide(self, objectId: str|None = None,
                    predefinedLayout: str|None = None,
                    insertionIndex: int|None = None) -> Self:
        """
        https://developers.google.com/slides/api/reference/rest/v1/presentations/request#createsliderequest
        """
        self._requests.append(CreateSlideRequest(objectId, insertionIndex,
                                                 LayoutReference(predefinedLayout=predefinedLayout)))
        return self

    def createShape(self, shapeType: str,
                    pageObjectId: str,
                    size: Size,
                    transform: AffineTransform|None = None,
                    objectId: str|None = None) -> Self:
        """
        https://developers.google.com/slides/api/reference/rest/v1/presentations/request#createshaperequest
        """
        self._requests.append(CreateShapeRequest(shapeType,
                                                 PageElementProperties(pageObjectId, size, transform),
                                                 objectId))
        return self

    def insertText(self, objectId: str, text: str, insertionIndex: int = 0) -> Self:
        """
        https://developers.google.com/slides/api/reference/rest/v1/presentations/request#inserttextrequest
        """
        self._requests.append(InsertTextRequest(objectId, text, insertionIndex))
        return self

    def createSheetsChart(self, spreadsheetId: str, chartId: int,
                          pageObjectId: str,
                          size: Size,
                          transform: AffineTransform|None = None,
                          linkingMode: str = "LINKED",
                          objectId: str|None = None) -> Self:
        """
        https://developers.google.com/slides/api/reference/rest/v1/presentations/request#createsheetschartrequest
        """
        if not spreadsheetId:
            raise ValueError("createSheetsChart() needs the source spreadsheetId")
        self._requests.append(CreateSheetsChartRequest(spreadsheetId, chartId,
                                                       PageElementProperties(pageObjectId, size, transform),
                                                       objectId, linkingMode))
        return self
