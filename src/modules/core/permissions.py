"""Caller context and role-based capability checks.

The API layer authenticates the request (SimpleJWT) and then asks
``Actor.has_role`` before invoking a service.  Services receive the already
authorised ``Actor`` only to record *who* did something; they never repeat
the check.

Roles are Django group names.  Superusers hold every role.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Optional

from rest_framework.permissions import BasePermission


class Role(StrEnum):
    OPERATOR = "operator"
    MANAGER = "manager"


@dataclass(frozen=True)
class Actor:
    """Authenticated caller as seen by the service layer."""

    id: Optional[str] = None
    roles: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @property
    def label(self) -> str:
        return self.id or "system"

    @classmethod
    def from_user(cls, user: Any) -> Actor:
        if user is None or not getattr(user, "is_authenticated", False):
            return cls()
        if getattr(user, "is_superuser", False):
            roles = frozenset(role.value for role in Role)
        else:
            groups = getattr(user, "groups", None)
            roles = (
                frozenset(groups.values_list("name", flat=True))
                if groups is not None
                else frozenset()
            )
        return cls(id=str(user.pk), roles=roles)


SYSTEM_ACTOR = Actor(id=None, roles=frozenset(role.value for role in Role))


class HasRole(BasePermission):
    """Grant access when the caller holds the role the view requires.

    Views declare ``required_roles = {"create": Role.OPERATOR, ...}``.
    Actions missing from the mapping only need authentication.
    """

    message = "You do not have the role required for this action."

    def has_permission(self, request, view) -> bool:
        required = getattr(view, "required_roles", {}).get(getattr(view, "action", None))
        if required is None:
            return True
        return Actor.from_user(request.user).has_role(required)
