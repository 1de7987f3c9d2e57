# services/port_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

DEFAULT_PORT = 8080

PortKind = Literal["default", "ephemeral", "explicit"]


class InvalidPortError(ValueError):
    pass


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Value:
    port: int

    def __post_init__(self) -> None:
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise TypeError(f"port must be an int, got {type(self.port).__name__}")


ABSENT = Absent()

PortSpec = Union[Absent, Value]


def port_spec(value: int | None) -> PortSpec:
    if value is None:
        return ABSENT
    return Value(value)


@dataclass(frozen=True)
class ResolvedPort:
    kind: PortKind
    value: int | None = None

    @property
    def bind_port(self) -> int:
        # 0 asks the OS for an ephemeral port
        return 0 if self.value is None else self.value


def check_default_port(port: int) -> int:
    if isinstance(port, bool) or not isinstance(port, int):
        raise TypeError(f"default port must be an int, got {type(port).__name__}")
    if port <= 0:
        raise InvalidPortError("default port must be positive")
    return port


def resolve(spec: PortSpec, default_port: int = DEFAULT_PORT) -> ResolvedPort:
    """
    Resolve a requested port.

    Rules (in order):
      - absent   -> default port (must itself be positive)
      - negative -> InvalidPortError
      - zero     -> ephemeral (bind 0, OS picks)
      - positive -> used verbatim, no upper bound check
    """
    if isinstance(spec, Absent):
        return ResolvedPort(kind="default", value=check_default_port(default_port))

    port = spec.port
    if port < 0:
        raise InvalidPortError("port cannot be negative")
    if port == 0:
        return ResolvedPort(kind="ephemeral")
    return ResolvedPort(kind="explicit", value=port)
