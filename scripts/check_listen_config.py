from __future__ import annotations

import argparse
from typing import NoReturn

from pydantic import ValidationError

from services.port_resolver import InvalidPortError
from settings import Settings, listen_config_from_settings, validate_env_settings


def _die(message: str, code: int = 1) -> NoReturn:
    print(message)
    raise SystemExit(code)


def _load_settings(args: argparse.Namespace) -> Settings:
    try:
        s = Settings()
    except ValidationError as exc:
        _die(f"Invalid settings: {exc}")

    if args.host is not None:
        s.HOST = args.host
    if args.port is not None:
        s.PORT = args.port
    return s


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Resolve the listen address from env settings.")
    parser.add_argument("--host", default=None, help="override HOST")
    parser.add_argument("--port", type=int, default=None, help="override PORT (0 = ephemeral)")
    args = parser.parse_args(argv)

    s = _load_settings(args)
    try:
        address = listen_config_from_settings(s).resolve()
    except InvalidPortError as exc:
        _die(f"Invalid port: {exc}")

    try:
        validate_env_settings(s)
    except RuntimeError as exc:
        _die(str(exc))

    print(f"listen: addr={address.addr} kind={address.port.kind}")


if __name__ == "__main__":
    main()
