"""Symbolic names for the backend services the integration tests target."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class ServiceName(str, Enum):
    """Known backend services, in declaration order.

    The first member is the default target when a caller names no service.
    """

    API = "api"
    AUTH = "auth"
    PAYMENTS = "payments"


def env_var_for(name: str) -> str:
    """Return the environment variable carrying a service's base URL."""
    return f"{re.sub(r'[^A-Za-z0-9]', '_', name).upper()}_URL"


@dataclass(frozen=True, slots=True)
class ServiceRegistry:
    """Immutable, ordered set of valid service identifiers."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("A service registry needs at least one service name.")

    @classmethod
    def from_enum(cls, enum_cls: type[Enum]) -> "ServiceRegistry":
        """Build a registry from an Enum of string values, keeping declaration order."""
        return cls(tuple(str(member.value) for member in enum_cls))

    @property
    def default(self) -> str:
        """First registered service, used when a caller names none."""
        return self.names[0]

    @staticmethod
    def normalize(value: "ServiceName | str") -> str:
        """Reduce an Enum member or plain string to the bare identifier."""
        if isinstance(value, Enum):
            return str(value.value)
        return value

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (str, Enum)):
            return False
        return self.normalize(value) in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


DEFAULT_REGISTRY = ServiceRegistry.from_enum(ServiceName)
