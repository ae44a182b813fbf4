from types import SimpleNamespace

import pytest

from trendradar_auth.app.services.authorization import check_permission, require_permission
from trendradar_auth.domain.entities import UserRole
from trendradar_auth.domain.exceptions import ForbiddenError
from trendradar_auth.domain.permissions import Action, Resource


def _identity(role: UserRole):
    return SimpleNamespace(id=7, email="someone@example.com", role=role)


def test_require_permission_allows_admin_on_users():
    assert require_permission(_identity(UserRole.admin), Resource.users, Action.view) is None


def test_require_permission_denies_viewer_on_users():
    with pytest.raises(ForbiddenError) as exc_info:
        require_permission(_identity(UserRole.viewer), Resource.users, Action.view)

    assert exc_info.value.resource == "Users"
    assert exc_info.value.action == "view"


def test_require_permission_denies_unlisted_pair():
    with pytest.raises(ForbiddenError):
        require_permission(_identity(UserRole.admin), Resource.trend_explorer, Action.delete)


def test_check_permission_logs_denial(caplog):
    with caplog.at_level("WARNING"):
        allowed = check_permission(_identity(UserRole.analyst), "Billing", "view")

    assert allowed is False
    assert "Permission denied" in caplog.text
    assert "Billing" in caplog.text


def test_check_permission_accepts_string_tags():
    assert check_permission(_identity(UserRole.owner), "ActionCenter", "apply") is True
