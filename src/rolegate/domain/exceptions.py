"""Domain exceptions."""


class RoleGateError(Exception):
    """Base exception for rolegate."""

    pass


class PermissionException(RoleGateError):
    """Base for permission model failures."""

    pass


class RoleNotFound(PermissionException):
    """Role lookup by name missed."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Role "{name}" not found')
        self.name = name


class PermissionNotFound(PermissionException):
    """Permission lookup by name missed."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Permission "{name}" not found')
        self.name = name


class GuardNotFound(PermissionException):
    """Guard lookup by name missed."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Guard "{name}" not found')
        self.name = name


class GuardMismatch(PermissionException):
    """Entity tagged with one guard was inserted into a container of another."""

    def __init__(self, expected: str, actual: str, name: str = "") -> None:
        super().__init__(
            f'"{name}" belongs to guard "{actual}", expected guard "{expected}"'
        )
        self.expected = expected
        self.actual = actual
        self.name = name
