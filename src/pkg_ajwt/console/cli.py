# src/pkg_ajwt/console/cli.py

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from ..domain.exceptions import TokenError
from ..integrations.common.codec_factory import create_token_codec_from_settings
from .env import settings_from_env
from ..settings import CodecSettings


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ajwt",
        description="Encode and decode HMAC-SHA512 signed tokens",
    )
    parser.add_argument(
        "--key",
        "-k",
        help="Shared secret (default: env AJWT_SECRET_KEY).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log decode failures at DEBUG level on stderr.",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="Sign a JSON object into a token.")
    encode.add_argument(
        "payload",
        nargs="?",
        default="-",
        help="JSON object to sign, or '-' to read it from stdin.",
    )
    encode.add_argument("--timestamp", "-t", type=int, help="Pin the issuance time (Unix seconds).")
    encode.add_argument("--nonce", "-n", help="Pin the nonce instead of generating one.")

    decode = commands.add_parser("decode", help="Verify a token and print its payload.")
    decode.add_argument(
        "token",
        nargs="?",
        default="-",
        help="Token to decode, or '-' to read it from stdin.",
    )
    decode.add_argument(
        "--require",
        "-r",
        nargs="*",
        help="Field names that must be present "
             "(defaults from env AJWT_REQUIRED_KEYS).",
    )
    decode.add_argument(
        "--validity",
        "-V",
        type=int,
        help="Maximum token age in seconds, 0 disables expiry "
             "(defaults from env AJWT_VALIDITY_DURATION).",
    )

    return parser.parse_args(args=argv)


def _read_arg(value: str) -> str:
    if value == "-":
        return sys.stdin.read().strip()
    return value


def _load_settings(args: argparse.Namespace) -> CodecSettings:
    if args.key:
        return CodecSettings(secret_key=args.key)
    return settings_from_env()


def _run(args: argparse.Namespace, settings: CodecSettings) -> dict[str, Any]:
    codec = create_token_codec_from_settings(settings)

    if args.command == "encode":
        payload = json.loads(_read_arg(args.payload))
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a JSON object")
        token = codec.encode(payload, settings.key, timestamp=args.timestamp, nonce=args.nonce)
        return {"token": token}

    required = args.require if args.require is not None else settings.required_keys
    validity = args.validity if args.validity is not None else settings.validity_duration
    payload = codec.decode(_read_arg(args.token), settings.key, required, validity)
    return {"payload": payload}


def _emit(body: dict[str, Any]) -> None:
    json.dump(body, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = _load_settings(args)
        summary = _run(args, settings)
    except TokenError as exc:
        _emit({"ok": False, "error": exc.kind.value, "detail": exc.detail})
        return 1
    except Exception as exc:  # noqa: BLE001
        _emit({"ok": False, "error": str(exc)})
        raise

    _emit({"ok": True, **summary})
    return 0


if __name__ == "__main__":
    sys.exit(main())
