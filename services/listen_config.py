# services/listen_config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from services.port_resolver import (
    ABSENT,
    DEFAULT_PORT,
    InvalidPortError,
    PortSpec,
    ResolvedPort,
    Value,
    check_default_port,
    port_spec,
    resolve,
)

DEFAULT_HOST = "localhost"


@dataclass(frozen=True)
class ListenAddress:
    host: str
    port: ResolvedPort

    @property
    def bind_port(self) -> int:
        return self.port.bind_port

    @property
    def is_ephemeral(self) -> bool:
        return self.port.kind == "ephemeral"

    @property
    def addr(self) -> str:
        return f"{self.host}:{self.bind_port}"


@dataclass(frozen=True)
class ListenConfig:
    host: str = DEFAULT_HOST
    port: PortSpec = ABSENT
    default_port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        check_default_port(self.default_port)

    @classmethod
    def from_port(cls, host: str = DEFAULT_HOST, port: int | None = None) -> "ListenConfig":
        return cls(host=host, port=port_spec(port))

    def resolve(self) -> ListenAddress:
        return ListenAddress(
            host=self.host,
            port=resolve(self.port, default_port=self.default_port),
        )


def listen_address(host: str = DEFAULT_HOST, port: int | None = None) -> ListenAddress:
    return ListenConfig.from_port(host, port).resolve()


class ListenConfigBuilder:
    """
    Fluent builder for ListenConfig.

    Each setter validates its own argument and raises right away, so
    build() never fails. Leaving port() uncalled means "use the default".
    """

    def __init__(self) -> None:
        self._config = ListenConfig()

    def host(self, host: str) -> "ListenConfigBuilder":
        self._config = replace(self._config, host=host)
        return self

    def port(self, port: int) -> "ListenConfigBuilder":
        spec = Value(port)
        if port < 0:
            raise InvalidPortError("port cannot be negative")
        self._config = replace(self._config, port=spec)
        return self

    def default_port(self, port: int) -> "ListenConfigBuilder":
        self._config = replace(self._config, default_port=check_default_port(port))
        return self

    def build(self) -> ListenConfig:
        return self._config


Option = Callable[[ListenConfig], ListenConfig]


def with_host(host: str) -> Option:
    def apply(cfg: ListenConfig) -> ListenConfig:
        return replace(cfg, host=host)

    return apply


def with_port(port: int) -> Option:
    spec = Value(port)
    if port < 0:
        raise InvalidPortError("port cannot be negative")

    def apply(cfg: ListenConfig) -> ListenConfig:
        return replace(cfg, port=spec)

    return apply


def with_default_port(port: int) -> Option:
    checked = check_default_port(port)

    def apply(cfg: ListenConfig) -> ListenConfig:
        return replace(cfg, default_port=checked)

    return apply


def listen_config(*opts: Option) -> ListenConfig:
    cfg = ListenConfig()
    for opt in opts:
        cfg = opt(cfg)
    return cfg
