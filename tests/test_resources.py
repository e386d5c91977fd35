from dataclasses import dataclass, field

import pytest

from gwsnippets.resources import prune, GoogleWorkSpaceResourceBase, GoogleWorkSpaceRequestBase

@dataclass
class DoThingRequest(GoogleWorkSpaceRequestBase):
    objectId: str = field(default="")
    count: int|None = field(default=None)
    nested: dict = field(default_factory=dict)

@dataclass
class Misnamed(GoogleWorkSpaceRequestBase):
    objectId: str = field(default="")

@dataclass
class Thing(GoogleWorkSpaceResourceBase):
    name: str = field(default="")
    size: int = field(default=0)
    flag: bool|None = field(default=None)

def test_prune():
    assert(prune({'a': None, 'b': {'c': None, 'd': 0}, 'e': [None, {'f': None}]}) ==
           {'b': {'d': 0}, 'e': [{}]})
    assert(prune("plain") == "plain")

def test_to_request():
    r = DoThingRequest("obj", None, {'deep': None, 'keep': False})
    assert(r.to_request() == {'doThing': {'objectId': 'obj', 'nested': {'keep': False}}})
    with pytest.raises(RuntimeError):
        Misnamed("obj").to_request()

def test_trim():
    t = Thing("thing")
    # zero is a value, empty string and None are not
    assert(t.trim() == {'name': 'thing', 'size': 0})
    assert(Thing().trim() == {'size': 0})

def test_update_fields():
    t = Thing("thing")
    updated = t.update_fields(size=3, flag=None, bogus=1)
    assert(updated == ['size'])
    assert(t.size == 3)
    assert(t.flag is None)

def test_from_dict():
    t = Thing.from_dict({'name': 'thing', 'size': 2, 'addedLater': 'ignored'})
    assert(t == Thing('thing', 2))
    assert(Thing.from_dict(None) == Thing())
