"""
RBAC Permission Matrix

Static table of which roles may perform which action on which resource.
Built once at import time into a read-only mapping keyed by
(resource, action). Anything not listed is denied.
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, NamedTuple, Optional, Tuple, Type, TypeVar, Union

from .entities.enums import UserRole


class Resource(str, Enum):
    dashboard = "Dashboard"
    trend_explorer = "TrendExplorer"
    action_center = "ActionCenter"
    data_lab = "DataLab"
    content_studio = "ContentStudio"
    reports = "Reports"
    notifications = "Notifications"
    integrations = "Integrations"
    settings = "Settings"
    users = "Users"
    billing = "Billing"
    audit_log = "AuditLog"


class Action(str, Enum):
    view = "view"
    create = "create"
    update = "update"
    delete = "delete"
    export = "export"
    apply = "apply"
    manage = "manage"


class Permission(NamedTuple):
    resource: Resource
    action: Action
    roles: FrozenSet[UserRole]


def _rule(resource: Resource, action: Action, *roles: UserRole) -> Permission:
    return Permission(resource, action, frozenset(roles))


ADMIN, OWNER, ANALYST, VIEWER = (
    UserRole.admin,
    UserRole.owner,
    UserRole.analyst,
    UserRole.viewer,
)

PERMISSIONS: Tuple[Permission, ...] = (
    # Dashboard
    _rule(Resource.dashboard, Action.view, ADMIN, OWNER, ANALYST, VIEWER),
    _rule(Resource.dashboard, Action.create, ADMIN, OWNER, ANALYST),
    _rule(Resource.dashboard, Action.update, ADMIN, OWNER, ANALYST),
    _rule(Resource.dashboard, Action.delete, ADMIN, OWNER),
    _rule(Resource.dashboard, Action.export, ADMIN, OWNER, ANALYST),
    # Trend Explorer
    _rule(Resource.trend_explorer, Action.view, ADMIN, OWNER, ANALYST, VIEWER),
    _rule(Resource.trend_explorer, Action.export, ADMIN, OWNER, ANALYST),
    # Action Center
    _rule(Resource.action_center, Action.view, ADMIN, OWNER, ANALYST),
    _rule(Resource.action_center, Action.apply, ADMIN, OWNER),
    # Data Lab
    _rule(Resource.data_lab, Action.view, ADMIN, OWNER, ANALYST),
    _rule(Resource.data_lab, Action.create, ADMIN, OWNER, ANALYST),
    _rule(Resource.data_lab, Action.delete, ADMIN, OWNER, ANALYST),
    # Content Studio
    _rule(Resource.content_studio, Action.view, ADMIN, OWNER, ANALYST),
    _rule(Resource.content_studio, Action.create, ADMIN, OWNER, ANALYST),
    _rule(Resource.content_studio, Action.update, ADMIN, OWNER, ANALYST),
    _rule(Resource.content_studio, Action.delete, ADMIN, OWNER, ANALYST),
    # Reports
    _rule(Resource.reports, Action.view, ADMIN, OWNER, ANALYST, VIEWER),
    _rule(Resource.reports, Action.create, ADMIN, OWNER, ANALYST),
    _rule(Resource.reports, Action.export, ADMIN, OWNER, ANALYST),
    # Notifications
    _rule(Resource.notifications, Action.view, ADMIN, OWNER, ANALYST, VIEWER),
    _rule(Resource.notifications, Action.manage, ADMIN, OWNER, ANALYST, VIEWER),
    # Integrations
    _rule(Resource.integrations, Action.view, ADMIN, OWNER, ANALYST),
    _rule(Resource.integrations, Action.create, ADMIN, OWNER),
    _rule(Resource.integrations, Action.update, ADMIN, OWNER),
    _rule(Resource.integrations, Action.delete, ADMIN, OWNER),
    # Settings
    _rule(Resource.settings, Action.view, ADMIN, OWNER, ANALYST, VIEWER),
    _rule(Resource.settings, Action.manage, ADMIN, OWNER),
    # Users
    _rule(Resource.users, Action.view, ADMIN),
    _rule(Resource.users, Action.create, ADMIN),
    _rule(Resource.users, Action.update, ADMIN),
    _rule(Resource.users, Action.delete, ADMIN),
    # Billing
    _rule(Resource.billing, Action.view, ADMIN, OWNER),
    _rule(Resource.billing, Action.manage, ADMIN, OWNER),
    # Audit Log
    _rule(Resource.audit_log, Action.view, ADMIN),
    _rule(Resource.audit_log, Action.export, ADMIN),
)

_MATRIX: Mapping[Tuple[Resource, Action], FrozenSet[UserRole]] = MappingProxyType(
    {(p.resource, p.action): p.roles for p in PERMISSIONS}
)

E = TypeVar("E", bound=Enum)


def _coerce(enum_cls: Type[E], value: Union[E, str]) -> Optional[E]:
    # Unknown tags map to None so lookups fall through to deny
    try:
        return enum_cls(value)
    except ValueError:
        return None


def has_permission(
    role: Union[UserRole, str], resource: Union[Resource, str], action: Union[Action, str]
) -> bool:
    """True iff a rule exists for (resource, action) and lists the role"""
    role_ = _coerce(UserRole, role)
    resource_ = _coerce(Resource, resource)
    action_ = _coerce(Action, action)
    if role_ is None or resource_ is None or action_ is None:
        return False

    allowed = _MATRIX.get((resource_, action_))
    if allowed is None:
        return False
    return role_ in allowed


def get_role_permissions(role: Union[UserRole, str]) -> List[Permission]:
    """All rules that list the role, in matrix order"""
    role_ = _coerce(UserRole, role)
    if role_ is None:
        return []
    return [p for p in PERMISSIONS if role_ in p.roles]


def can_access_resource(role: Union[UserRole, str], resource: Union[Resource, str]) -> bool:
    """True iff the role is allowed any action on the resource"""
    role_ = _coerce(UserRole, role)
    resource_ = _coerce(Resource, resource)
    if role_ is None or resource_ is None:
        return False
    return any(p.resource == resource_ and role_ in p.roles for p in PERMISSIONS)
