"""ipa-validatorのコマンドラインインターフェース。"""

import argparse
import asyncio
import logging
import sys

from ipa_validator.config import ServerConfig, ValidateIpaOptions
from ipa_validator.models.errors import IpaValidatorError
from ipa_validator.services.invoker import AltoolInvoker
from ipa_validator.services.validate import ValidationService

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stdout,
    )


def _cmd_serve(args: argparse.Namespace, config: ServerConfig) -> int:
    import uvicorn

    from ipa_validator.server import create_server

    mcp = create_server(config)
    app = mcp.http_app(transport="streamable-http")
    uvicorn.run(app, host=config.host, port=config.port)
    return 0


def _cmd_validate(args: argparse.Namespace, config: ServerConfig) -> int:
    # 引数で指定された値は環境変数より優先する（パスワードは環境変数のみ）
    overrides = {
        key: value
        for key, value in (("path", args.path), ("platform", args.platform), ("username", args.username))
        if value is not None
    }
    options = ValidateIpaOptions(**overrides)
    service = ValidationService(invoker=AltoolInvoker(xcrun_path=config.xcrun_path))
    try:
        asyncio.run(service.validate(options.to_request()))
    except IpaValidatorError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ipa-validator", description="Validate IPA files with altool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the MCP server over streamable HTTP")
    serve.set_defaults(func=_cmd_serve)

    validate = subparsers.add_parser(
        "validate",
        help="Validate an IPA file (password is read from FL_VALIDATE_IPA_PASSWORD)",
    )
    validate.add_argument("--path", default=None, help="Path to the IPA file")
    validate.add_argument("--platform", default=None, help="Platform type (ios, macos)")
    validate.add_argument("--username", default=None, help="Apple ID")
    validate.set_defaults(func=_cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = ServerConfig()
    _configure_logging(config.log_level)
    return int(args.func(args, config) or 0)
