"""
Authorization guard over the RBAC permission matrix.

Pure: no I/O and no auditing. Call sites record audit entries themselves.
"""

import logging
from typing import Protocol, Union

from trendradar_auth.domain.entities import UserRole
from trendradar_auth.domain.exceptions import ForbiddenError
from trendradar_auth.domain.permissions import Action, Resource, has_permission

logger = logging.getLogger(__name__)


class Principal(Protocol):
    id: int
    email: str
    role: UserRole


def check_permission(
    identity: Principal, resource: Union[Resource, str], action: Union[Action, str]
) -> bool:
    """Check the matrix for the identity's role, logging denials"""
    allowed = has_permission(identity.role, resource, action)
    if not allowed:
        logger.warning(
            "Permission denied: user %s (%s) attempted %s on %s",
            identity.id,
            _tag(identity.role),
            _tag(action),
            _tag(resource),
        )
    return allowed


def require_permission(
    identity: Principal, resource: Union[Resource, str], action: Union[Action, str]
) -> None:
    """
    Raise ForbiddenError unless the identity's role may perform the action.

    Raises:
        ForbiddenError: role not allowed (or no rule for the pair)
    """
    if not check_permission(identity, resource, action):
        raise ForbiddenError(_tag(resource), _tag(action))


def _tag(value) -> str:
    return getattr(value, "value", value)
