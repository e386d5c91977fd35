from dataclasses import asdict, fields, is_dataclass
from typing import Any, List, Self
import re

def prune(value: Any) -> Any:
    """
    Recursively drop any None values from dicts and lists.
    Optional request fields are simply left out rather than sent as null, some
    of the GWS 'oneof' fields (e.g. layoutId vs predefinedLayout) get upset otherwise.
    """
    if isinstance(value, dict):
        return {k: prune(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [prune(v) for v in value if v is not None]
    return value

class GoogleWorkSpaceResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    """
    def to_base(self) -> dict:
        """
        Default just return the dict representation of the object as needed by
        the GWS client.  Something more complicated can override.
        Also with a common base makes it easy to filter with isinstance.
        Call fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        return asdict(self)

    def trim(self) -> dict|None:
        """
        Return a 'trimmed' dict of the resource.  That is, removing any top level attributes
        that are an empty or None.  For empty needs to be a string, or container. For None
        needs to be a value like int or bool where 'not' could be a valid value.  This is
        for GWS requests that only want filled-in fields, like a patch body.
        """
        b = self.to_base()
        if b:
            for k, v in list(b.items()):
                if v is None or (type(v) not in [int,bool,float] and not v):
                    del b[k]
        return b

    def fixup(self) -> None:
        """
        notify a subclass to do any field adjustments
        """
        pass

    def update_fields(self, **kwargs) -> List[str]:
        """
        Update fields that may be present.
        Returns the names of the fields actually set, handy for an updateMask.
        """
        updated_fields = []
        if is_dataclass(self):
            names = [f.name for f in fields(self)]
            for k,v in kwargs.items():
                if v is not None and k in names:
                    setattr(self, k, v)
                    updated_fields.append(k)
            self.fixup()
        return updated_fields

    @classmethod
    def from_dict(cls, d: dict|None) -> Self:
        """
        Build from a response dict.  The APIs keep adding fields so anything
        we don't model is dropped instead of blowing up the constructor.
        """
        d = dict(d or {})
        if is_dataclass(cls):
            names = {f.name for f in fields(cls) if f.init}
            d = {k: v for k, v in d.items() if k in names}
        return cls(**d)

class GoogleWorkSpaceRequestBase(GoogleWorkSpaceResourceBase):
    """
    Base class for batchUpdate requests (slides and sheets share the format)
    to get the actual request dict into the right shape.
    The request key is pulled out of the class name, e.g. CreateSlideRequest
    becomes {"createSlide": {...}}
    """
    def to_request(self) -> dict[str,dict]:
        name = self.__class__.__name__
        # need to strip off the trailing 'Request' class name and
        # set the first letter to lower case.  could be done
        # several ways but lets go re
        m = re.match("^([a-zA-Z])([a-zA-Z]+)Request$", name)
        if not m:
            raise RuntimeError(f"Invalid Google Work Space request format for class name: {name}")
        key = m.group(1).lower() + m.group(2)
        return {key: prune(self.to_base())}
