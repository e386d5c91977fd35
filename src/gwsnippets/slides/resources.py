"""
Class implementations of the slides resources the snippets deal with.
Same deal as sheets, these are logical groupings of data fields so dataclasses
it is.  asdict() handles the nested dataclasses on the way out, on the way in the
nested dicts are turned back into dataclasses in fixup().
Only what the snippets need is modelled, plenty of Page/PageElement is left as dicts.
"""
from dataclasses import dataclass, field, asdict
import re
from typing import List, ClassVar

from ..resources import GoogleWorkSpaceResourceBase

class GoogleSlidesEnum():
    """
    An 'enum' in the slides client is just a string so this is
    just to translate and validate input.
    """
    _VALID_UNITS = {
        "EMU": "EMU",
        "PT": "PT",
        "POINT": "PT",
        "POINTS": "PT"
    }
    _VALID_LINKING_MODES = {
        "LINKED": "LINKED",
        "NOT_LINKED_IMAGE": "NOT_LINKED_IMAGE",
        "IMAGE": "NOT_LINKED_IMAGE"
    }
    _VALID_PREDEFINED_LAYOUTS = ['BLANK', 'CAPTION_ONLY', 'TITLE', 'TITLE_AND_BODY',
                                 'TITLE_AND_TWO_COLUMNS', 'TITLE_ONLY', 'SECTION_HEADER',
                                 'SECTION_TITLE_AND_DESCRIPTION', 'ONE_COLUMN_TEXT',
                                 'MAIN_POINT', 'BIG_NUMBER']
    # the API has well over a hundred shape types, anything of the right form goes
    _SHAPE_TYPE_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")

    @classmethod
    def unit(cls, unit: str) -> str:
        """https://developers.google.com/slides/api/reference/rest/v1/Unit"""
        return cls._VALID_UNITS.get(str(unit).upper(), "")

    @classmethod
    def linkingMode(cls, mode: str) -> str:
        """https://developers.google.com/slides/api/reference/rest/v1/presentations/request#linkingmode"""
        return cls._VALID_LINKING_MODES.get(str(mode).upper(), "")

    @classmethod
    def predefinedLayout(cls, layout: str) -> str:
        """https://developers.google.com/slides/api/reference/rest/v1/presentations/request#predefinedlayout"""
        l = str(layout).upper()
        return l if l in cls._VALID_PREDEFINED_LAYOUTS else ""

    @classmethod
    def shapeType(cls, shape: str) -> str:
        """https://developers.google.com/slides/api/reference/rest/v1/presentations.pages/shapes#type"""
        s = str(shape).upper()
        return s if cls._SHAPE_TYPE_RE.match(s) and s != "TYPE_UNSPECIFIED" else ""

@dataclass
class Dimension(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/slides/api/reference/rest/v1/Dimension"""
    magnitude: int|float = field(default=0)
    unit: str = field(default="EMU")

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        u = GoogleSlidesEnum.unit(self.unit)
        if not u:
            raise ValueError(f"Invalid unit value: {self.unit}")
        self.unit = u

@dataclass
class Size(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/slides/api/reference/rest/v1/Size"""
    width: Dimension|dict = field(default_factory=Dimension)
    height: Dimension|dict = field(default_factory=Dimension)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.width = self.width if isinstance(self.width, Dimension) else Dimension(**dict(self.width))
        self.height = self.height if isinstance(self.height, Dimension) else Dimension(**dict(self.height))

    @classmethod
    def square(cls, magnitude: int|float, unit: str = "EMU"):
        return cls(Dimension(magnitude, unit), Dimension(magnitude, unit))

@dataclass
class AffineTransform(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations.pages/other#affinetransform
    Shears are left as None so they drop out of the request unless asked for.
    """
    scaleX: int|float = field(default=1)
    scaleY: int|float = field(default=1)
    shearX: int|float|None = field(default=None)
    shearY: int|float|None = field(default=None)
    translateX: int|float = field(default=0)
    translateY: int|float = field(default=0)
    unit: str = field(default="EMU")

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        u = GoogleSlidesEnum.unit(self.unit)
        if not u:
            raise ValueError(f"Invalid unit value: {self.unit}")
        self.unit = u

@dataclass
class PageElementProperties(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations/request#pageelementproperties
    Where a new element lands: which page, how big and where on it.
    """
    pageObjectId: str = field(default="")
    size: Size|dict|None = field(default=None)
    transform: AffineTransform|dict|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.pageObjectId)

    def fixup(self) -> None:
        if self.size is not None and not isinstance(self.size, Size):
            self.size = Size(**dict(self.size))
        if self.transform is not None and not isinstance(self.transform, AffineTransform):
            self.transform = AffineTransform(**dict(self.transform))

@dataclass
class LayoutReference(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations/request#layoutreference
    It's a oneof, set either the predefinedLayout or a layoutId from the presentation masters.
    """
    predefinedLayout: str|None = field(default=None)
    layoutId: str|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.predefinedLayout) or bool(self.layoutId)

    def fixup(self) -> None:
        if self.predefinedLayout is not None and self.layoutId is not None:
            raise ValueError("LayoutReference takes a predefinedLayout or a layoutId, not both")
        if self.predefinedLayout is not None:
            l = GoogleSlidesEnum.predefinedLayout(self.predefinedLayout)
            if not l:
                raise ValueError(f"Invalid predefined layout: {self.predefinedLayout}")
            self.predefinedLayout = l

@dataclass
class Page(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations.pages#resource:-page
    The page elements and properties stay as raw dicts.
    """
    objectId: str = field(default="")
    pageType: str = field(default="")
    pageElements: List[dict] = field(default_factory=list)
    revisionId: str = field(default="")
    pageProperties: dict = field(default_factory=dict)
    slideProperties: dict = field(default_factory=dict)
    layoutProperties: dict = field(default_factory=dict)
    notesProperties: dict = field(default_factory=dict)
    masterProperties: dict = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.objectId)

    def __str__(self) -> str:
        return f"{self.objectId}:{self.pageType}" if self else "<invalid page>"

@dataclass
class Presentation(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/slides/api/reference/rest/v1/presentations#resource:-presentation
    """
    presentationId: str = field(default="")
    title: str = field(default="")
    pageSize: Size|dict|None = field(default=None)
    slides: List[Page|dict] = field(default_factory=list)
    layouts: List[Page|dict] = field(default_factory=list)
    masters: List[Page|dict] = field(default_factory=list)
    notesMaster: dict = field(default_factory=dict)
    locale: str = field(default="")
    revisionId: str = field(default="")

    valid_page_lists: ClassVar[List[str]] = ['slides', 'layouts', 'masters']

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.presentationId)

    def __str__(self) -> str:
        if self:
            return f"{self.title}<{self.presentationId}>[{len(self.slides)} slides]"
        return "unconnected"

    def fixup(self) -> None:
        if self.pageSize is not None and not isinstance(self.pageSize, Size):
            self.pageSize = Size(**dict(self.pageSize))
        for name in self.valid_page_lists:
            pages = getattr(self, name)
            setattr(self, name, [p if isinstance(p, Page) else Page.from_dict(p) for p in pages])

    def to_base(self) -> dict:
        self.fixup()
        b = asdict(self)
        if self.pageSize is None:
            del b['pageSize']
        return b

    @property
    def slide_ids(self) -> List[str]:
        return [s.objectId for s in self.slides]
