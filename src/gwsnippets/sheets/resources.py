"""
Class implementations of sheets request resources.
As these are just logical groupings of data fields we use dataclasses
to implement.  The nested aspect does cause some headaches as there
is a handy dataclass.asdict() method to get a dict translation of the
class fields, which is exactly what that request client needs, but
there's no inverse support, as in initializing a dataclass from a dict.
So nested dataclass fields get converted in fixup().
Not all resources/requests/responses are implemented, just what the snippets use.
"""
from dataclasses import dataclass, field, asdict
from typing import List

from ..resources import GoogleWorkSpaceResourceBase

@dataclass
class SpreadsheetProperties(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets#SpreadsheetProperties
    """
    title: str = field(default="")
    locale: str = field(default="")
    autoRecalc: str = field(default="")
    timeZone: str = field(default="")
    defaultFormat: dict = field(default_factory=dict)
    iterativeCalculationSettings: dict = field(default_factory=dict)
    spreadsheetTheme: dict = field(default_factory=dict)
    importFunctionsExternalUrlAccessAllowed: bool|None = field(default=None)

    def __bool__(self) -> bool:
        return bool(self.title)

@dataclass
class GridProperties(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#gridproperties"""
    rowCount: int = field(default=-1)
    columnCount: int = field(default=-1)
    frozenRowCount: int = field(default=0)
    frozenColumnCount: int = field(default=0)
    hideGridlines: bool = field(default=False)
    rowGroupControlAfter: bool = field(default=False)
    columnGroupControlAfter: bool = field(default=False)

    def __bool__(self) -> bool:
        return self.rowCount >= 0 and self.columnCount >= 0

@dataclass
class SheetProperties(GoogleWorkSpaceResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheetproperties"""
    sheetId: int = field(default=-1)
    title: str = field(default="")
    index: int = field(default=-1)
    sheetType: str = field(default="")
    gridProperties: GridProperties|dict = field(default_factory=dict)
    hidden: bool = field(default=False)
    tabColorStyle: dict = field(default_factory=dict)
    rightToLeft: bool = field(default=False)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.gridProperties = self.gridProperties if isinstance(self.gridProperties,GridProperties) else GridProperties.from_dict(self.gridProperties)

    def __bool__(self) -> bool:
        """
        True if it is valid, which is the ID and index are 0 or positive
        as negative index is not possible
        """
        return self.sheetId >= 0 and self.index >= 0 and bool(self.title)

    def __str__(self) -> str:
        if not self:
            return "<invalid sheet>"
        val = f"{str(self.title)}({str(self.sheetId)}[{str(self.index)}]):{str(self.sheetType)}"
        if self.sheetType == 'GRID':
            val += f"({self.gridProperties.rowCount}Rx{self.gridProperties.columnCount}C)"
        return val

@dataclass
class Sheet(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheet
    Representation of a sheet (tab) within a spreadsheet.  Only the properties are
    modelled, the charts are kept as dicts because the chartId is all a slide needs.
    """
    properties: SheetProperties|dict = field(default_factory=dict)
    charts: List[dict] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.properties = self.properties if isinstance(self.properties,SheetProperties) else SheetProperties.from_dict(self.properties)

    def __bool__(self) -> bool:
        return bool(self.properties)

    def __str__(self) -> str:
        return str(self.properties)

    @property
    def chart_ids(self) -> List[int]:
        return [c.get('chartId') for c in self.charts if 'chartId' in c]

@dataclass
class GridRange(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#gridrange
    Indexes are zero based and half open, start inclusive and end exclusive.
    A missing index means unbounded on that side.
    """
    sheetId: int = field(default=0)
    startRowIndex: int|None = field(default=None)
    endRowIndex: int|None = field(default=None)
    startColumnIndex: int|None = field(default=None)
    endColumnIndex: int|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return self.sheetId >= 0

    def fixup(self) -> None:
        for start, end in [(self.startRowIndex, self.endRowIndex),
                           (self.startColumnIndex, self.endColumnIndex)]:
            if start is not None and start < 0:
                raise ValueError(f"GridRange start index must be >= 0 not: {start}")
            if start is not None and end is not None and end < start:
                raise ValueError(f"GridRange end index {end} before start index {start}")

    def __len__(self) -> int:
        """Number of cells if fully bounded, 0 otherwise."""
        if None in (self.startRowIndex, self.endRowIndex, self.startColumnIndex, self.endColumnIndex):
            return 0
        return (self.endRowIndex - self.startRowIndex) * (self.endColumnIndex - self.startColumnIndex)

@dataclass
class ExtendedValue(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/other#extendedvalue
    A oneof, only one of these can be set.
    """
    numberValue: float|None = field(default=None)
    stringValue: str|None = field(default=None)
    boolValue: bool|None = field(default=None)
    formulaValue: str|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        set_values = [f for f, v in asdict(self).items() if v is not None]
        if len(set_values) > 1:
            raise ValueError(f"ExtendedValue can only hold one value, got: {set_values}")

    @classmethod
    def of(cls, value: bool|int|float|str):
        """Pick the right slot for a python value, strings starting with '=' are formulas."""
        if isinstance(value, bool):
            return cls(boolValue=value)
        if isinstance(value, (int, float)):
            return cls(numberValue=value)
        s = str(value)
        if s.startswith('='):
            return cls(formulaValue=s)
        return cls(stringValue=s)

@dataclass
class CellData(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/cells#celldata
    Only the value the user entered is modelled, formats etc are left out.
    """
    userEnteredValue: ExtendedValue|dict|None = field(default=None)
    note: str|None = field(default=None)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        if self.userEnteredValue is not None and not isinstance(self.userEnteredValue, ExtendedValue):
            self.userEnteredValue = ExtendedValue(**dict(self.userEnteredValue))

@dataclass
class Spreadsheet(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets#resource:-spreadsheet
    The representation of a spreadsheet.
    """
    spreadsheetId: str = field(default="")
    properties: SpreadsheetProperties|dict = field(default_factory=dict)
    sheets: List[Sheet|dict] = field(default_factory=list)
    spreadsheetUrl: str = field(default="")

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.properties = self.properties if isinstance(self.properties,SpreadsheetProperties) else SpreadsheetProperties.from_dict(self.properties)
        self.sheets = [s if isinstance(s,Sheet) else Sheet.from_dict(s) for s in self.sheets]

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def __str__(self) -> str:
        val = 'unconnected'
        if self.spreadsheetId:
            if self.sheets:
                val = self.properties.title
                val += '[' + ','.join(str(s) for s in self.sheets) + ']'
            else:
                val = f"{self.spreadsheetId}(unconnected)"
        return val

    def create_body(self) -> dict:
        """
        The body for spreadsheets.create, only filled in fields and no spreadsheetId
        as that is assigned by the server.
        """
        b = self.trim()
        b.pop('spreadsheetId', None)
        if 'properties' in b:
            b['properties'] = self.properties.trim()
        if 'sheets' in b:
            b['sheets'] = [{'properties': self._new_sheet_properties(s.properties)} for s in self.sheets]
        return b

    @staticmethod
    def _new_sheet_properties(props: SheetProperties) -> dict:
        # -1 is our 'unset' for the ints, the server picks those
        p = props.trim()
        for k in ['sheetId', 'index']:
            if p.get(k, -1) < 0:
                p.pop(k, None)
        if not props.gridProperties:
            p.pop('gridProperties', None)
        return p
