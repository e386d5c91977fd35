from dataclasses import dataclass, field
from typing import ClassVar, List, Self
from functools import partial
import logging

from .resources import GoogleWorkSpaceResourceBase

from .access import require_service

logger = logging.getLogger(__name__)

# do this as module level or a parent class instance?
# simpler at module level and achieves the same thing
_get_service = partial(require_service, "chat", "v1")

@dataclass
class Membership(GoogleWorkSpaceResourceBase):
    """
    https://developers.google.com/workspace/chat/api/reference/rest/v1/spaces.members#Membership
    A user's (or group's) relationship to a space.  The name has the form
    spaces/{space}/members/{member}.
    Changing role needs user credentials with the chat.memberships scope,
    the caller has to be a space manager.
    None is the empty value for every field, only the masked fields are sent on update.
    """
    name: str|None = field(default=None)
    state: str|None = field(default=None)
    role: str|None = field(default=None)
    member: dict|None = field(default=None)
    groupMember: dict|None = field(default=None)
    createTime: str|None = field(default=None)
    deleteTime: str|None = field(default=None)

    valid_roles: ClassVar[List[str]] = ['ROLE_MEMBER', 'ROLE_MANAGER']
    # the only field the patch call accepts
    updatable_fields: ClassVar[List[str]] = ['role']

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.name) and self.name.startswith("spaces/") and "/members/" in self.name

    def __str__(self) -> str:
        if self:
            return f"{self.name}:{self.role}"
        return "<empty>"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    def fixup(self) -> None:
        if self.role is not None:
            r = str(self.role).upper()
            if not r.startswith("ROLE_"):
                r = "ROLE_" + r
            if r not in self.valid_roles and r != 'ROLE_UNSPECIFIED':
                raise ValueError(f"Invalid membership role: {self.role}")
            self.role = r

    @staticmethod
    def membership_name(space: str, member: str) -> str:
        """spaces/{space}/members/{member}, either part may already carry its prefix"""
        space = space if space.startswith("spaces/") else f"spaces/{space}"
        member = member.split("/")[-1]
        return f"{space}/members/{member}"

    def update(self, paths: List[str]|None = None) -> Self:
        """
        Push the current field values upstream and refresh from the response.
        paths defaults to everything updatable that is set.
        """
        if paths is None:
            paths = [p for p in self.updatable_fields if getattr(self, p) is not None]
        updated = updateMembership(self, paths)
        self.update_fields(**updated.to_base())
        return self

def updateMembership(membership: Membership|dict, updateMask: List[str]|str) -> Membership:
    """
    Wrapper for calling the patch() spaces.members method.
    See https://developers.google.com/workspace/chat/api/reference/rest/v1/spaces.members/patch
    updateMask is the list of field paths to change, currently only 'role' is supported.
    """
    m = membership if isinstance(membership, Membership) else Membership.from_dict(membership)
    if not m:
        raise ValueError(f"Invalid membership name: {m.name}")
    paths = [updateMask] if isinstance(updateMask, str) else list(updateMask)
    if not paths:
        raise ValueError("updateMembership() needs at least one field path")
    for p in paths:
        if p not in Membership.updatable_fields:
            raise ValueError(f"Membership field {p} cannot be updated")
    body = {p: getattr(m, p) for p in paths}
    response = _get_service().spaces().members().patch(name=m.name,
                                                       updateMask=",".join(paths),
                                                       body=body).execute()
    logger.info("updated membership %s fields %s", m.name, paths)
    return Membership.from_dict(response)
