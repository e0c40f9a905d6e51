"""Permission manager - facade over guards, permissions, roles and checks."""

from collections.abc import Callable
from dataclasses import asdict, replace
from typing import Any

from loguru import logger

from rolegate.application.dto import ManagerConfig, ManagerDependencies
from rolegate.domain.entities import Guard, Permission, Role
from rolegate.domain.exceptions import GuardNotFound, PermissionNotFound, RoleNotFound
from rolegate.domain.mixins import PermissionSubject
from rolegate.domain.value_objects import resolve_ref

PermissionCheck = Callable[[Any, str, str], bool]
RoleCheck = Callable[[Any, str, str], bool]


class PermissionManager:
    """Registry of guards plus the entry point for membership checks.

    Lookups and checks are synchronous. Calls that reach an injected
    collaborator (repositories, cache, event dispatcher) are coroutines and
    silently do nothing when that collaborator was not provided.
    """

    def __init__(
        self,
        config: ManagerConfig | None = None,
        dependencies: ManagerDependencies | None = None,
    ) -> None:
        self.config = config or ManagerConfig()
        self._dependencies = dependencies or ManagerDependencies()
        self._guards: dict[str, Guard] = {}
        self._permission_checks: dict[str, PermissionCheck] = {}
        self._role_checks: dict[str, RoleCheck] = {}

        self.create_guard(self.config.default_guard)

    @property
    def dependencies(self) -> ManagerDependencies:
        return self._dependencies

    def _resolve_guard_name(self, guard_name: str | None) -> str:
        return guard_name or self.config.default_guard

    # --- Guards ---

    def create_guard(self, name: str) -> Guard:
        """Create and register a guard, replacing any guard of the same name."""
        if name in self._guards:
            logger.debug("Replacing guard {}", name)
        guard = Guard(name)
        self._guards[name] = guard
        return guard

    def get_guard(self, name: str) -> Guard:
        guard = self._guards.get(name)
        if guard is None:
            raise GuardNotFound(name)
        return guard

    def get_default_guard(self) -> Guard:
        return self.get_guard(self.config.default_guard)

    # --- Permissions and roles ---

    def create_permission(self, name: str, guard_name: str | None = None) -> Permission:
        """Create a permission inside a guard. Not persisted."""
        guard = self.get_guard(self._resolve_guard_name(guard_name))
        permission = Permission(name=name, guard_name=guard.name)
        guard.add_permission(permission)
        logger.debug("Created permission {} in guard {}", name, guard.name)
        return permission

    def create_role(self, name: str, guard_name: str | None = None) -> Role:
        """Create a role inside a guard. Not persisted."""
        guard = self.get_guard(self._resolve_guard_name(guard_name))
        role = Role(name=name, guard_name=guard.name)
        guard.add_role(role)
        logger.debug("Created role {} in guard {}", name, guard.name)
        return role

    def get_permission(self, name: str, guard_name: str | None = None) -> Permission:
        guard = self.get_guard(self._resolve_guard_name(guard_name))
        permission = guard.get_permission(name)
        if permission is None:
            raise PermissionNotFound(name)
        return permission

    def get_role(self, name: str, guard_name: str | None = None) -> Role:
        guard = self.get_guard(self._resolve_guard_name(guard_name))
        role = guard.get_role(name)
        if role is None:
            raise RoleNotFound(name)
        return role

    def get_all_permissions(self, guard_name: str | None = None) -> list[Permission]:
        return self.get_guard(self._resolve_guard_name(guard_name)).permissions

    def get_all_roles(self, guard_name: str | None = None) -> list[Role]:
        return self.get_guard(self._resolve_guard_name(guard_name)).roles

    # --- Checks ---

    def register_permission_check(self, key: str, check: PermissionCheck) -> None:
        """Install a check used instead of the subject's own logic.

        ``key`` is matched against the guard argument of ``check_permission``;
        it does not have to name an existing guard.
        """
        self._permission_checks[key] = check

    def register_role_check(self, key: str, check: RoleCheck) -> None:
        self._role_checks[key] = check

    def check_permission(
        self,
        subject: PermissionSubject,
        permission: str | Permission,
        guard_name: str | None = None,
    ) -> bool:
        key = self._resolve_guard_name(guard_name)
        check = self._permission_checks.get(key)
        if check is not None:
            name = resolve_ref(permission, key).name
            logger.debug("Custom permission check {} for {}", key, name)
            return bool(check(subject, name, key))
        return subject.has_permission(permission, key)

    def check_role(
        self,
        subject: PermissionSubject,
        role: str | Role,
        guard_name: str | None = None,
    ) -> bool:
        key = self._resolve_guard_name(guard_name)
        check = self._role_checks.get(key)
        if check is not None:
            name = resolve_ref(role, key).name
            logger.debug("Custom role check {} for {}", key, name)
            return bool(check(subject, name, key))
        return subject.has_role(role, key)

    def for_user(self, subject: PermissionSubject) -> PermissionSubject:
        return subject

    def for_guard(self, guard_name: str) -> "PermissionManager":
        """Return a manager defaulting to ``guard_name``.

        The new manager works on a shallow copy of this manager's guard
        registry, so guards created there are not visible here. The guard is
        created in the copy when it does not exist yet.
        """
        manager = PermissionManager(
            replace(self.config, default_guard=guard_name), self._dependencies
        )
        guards = dict(self._guards)
        guards.setdefault(guard_name, manager._guards[guard_name])
        manager._guards = guards
        manager._permission_checks = dict(self._permission_checks)
        manager._role_checks = dict(self._role_checks)
        return manager

    # --- Collaborators ---

    async def clear_cache(self) -> None:
        cache = self._dependencies.cache_service
        if self.config.cache_enabled and cache is not None:
            logger.debug("Clearing permission cache")
            await cache.clear()

    async def save_permission_to_repository(self, permission: Permission) -> None:
        repository = self._dependencies.permission_repository
        if repository is not None:
            await repository.save(permission)

    async def save_role_to_repository(self, role: Role) -> None:
        repository = self._dependencies.role_repository
        if repository is not None:
            await repository.save(role)

    async def save_guard_to_repository(self, guard: Guard) -> None:
        repository = self._dependencies.guard_repository
        if repository is not None:
            await repository.save(guard)

    async def dispatch_event(self, event: str, data: Any) -> None:
        dispatcher = self._dependencies.event_dispatcher
        if dispatcher is not None:
            logger.debug("Dispatching event {}", event)
            await dispatcher.dispatch(event, data)

    def to_json(self) -> dict[str, Any]:
        return {
            "config": asdict(self.config),
            "guards": [
                {"name": name, "guard": guard.to_json()}
                for name, guard in self._guards.items()
            ],
        }
