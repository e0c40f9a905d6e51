"""Unit tests for HasRoles mixin."""

import pytest

from rolegate.domain.entities import Permission, Role
from rolegate.domain.exceptions import GuardMismatch
from rolegate.domain.mixins import HasRoles

from tests.conftest import User


def test_assign_by_name(user: User) -> None:
    user.assign_role("admin")
    assert user.has_role("admin")
    assert user.has_role("admin", "web")
    assert not user.has_role("admin", "api")


def test_assign_is_idempotent(user: User) -> None:
    role = Role(name="admin")
    user.assign_role(role)
    user.assign_role(role)
    user.assign_role("admin")
    assert len(user.roles) == 1


def test_assign_entity_stores_copy(user: User) -> None:
    role = Role(name="admin", permissions=[Permission(name="edit")])
    user.assign_role(role)
    assert user.roles == [role]
    assert user.roles[0] is not role
    assert user.has_permission("edit")


def test_assign_entity_to_other_guard_with_permissions_rejected(user: User) -> None:
    role = Role(name="admin", permissions=[Permission(name="edit")])
    with pytest.raises(GuardMismatch):
        user.assign_role(role, "api")


def test_entity_without_guard_checked_against_web(user: User) -> None:
    api_role = Role(name="token", guard_name="api")
    user.assign_role(api_role)
    assert [r.guard_name for r in user.roles] == ["api"]
    assert not user.has_role(api_role)
    assert user.has_role(api_role, "api")


def test_remove_entity_without_guard_targets_web(user: User) -> None:
    user.assign_role("token", "api")
    user.assign_role("token")
    user.remove_role(Role(name="token", guard_name="api"))
    assert user.has_role("token", "api")
    assert not user.has_role("token", "web")


def test_remove_role(user: User) -> None:
    user.assign_role("admin")
    user.assign_role("admin", "api")
    user.remove_role("admin")
    assert not user.has_role("admin")
    assert user.has_role("admin", "api")


def test_any_and_all(user: User) -> None:
    user.assign_role("admin")
    user.assign_role("editor")
    assert user.has_any_role(["guest", "editor"])
    assert not user.has_any_role(["guest"])
    assert user.has_all_roles(["admin", "editor"])
    assert not user.has_all_roles(["admin", "guest"])


def test_sync_roles_scoped_to_guard(user: User) -> None:
    user.assign_role("admin", "web")
    user.assign_role("token", "api")
    user.sync_roles(["editor"], "web")
    assert [r.name for r in user.get_roles("web")] == ["editor"]
    assert [r.name for r in user.get_roles("api")] == ["token"]


def test_get_all_roles_returns_every_guard(user: User) -> None:
    user.assign_role("admin", "web")
    user.assign_role("token", "api")
    assert {(r.name, r.guard_name) for r in user.get_all_roles()} == {
        ("admin", "web"),
        ("token", "api"),
    }


def test_storage_created_lazily() -> None:
    class Service(HasRoles):
        id = "svc"

    subject = Service()
    assert not subject.has_role("worker")
    subject.assign_role("worker")
    assert subject.has_role("worker")
