from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jqlive.core.config import build_shorthands, get_user_config_path, load_config, read_config
from jqlive.core.errors import ConfigError, InvalidDocumentError
from jqlive.core.log import get_logger, setup_logging
from jqlive.core.validate import is_valid

log = get_logger(__name__)

EXIT_CONFIG = 2
EXIT_INVALID_DOCUMENT = 3


def read_document(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError([f"file not found: {path}"]) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError([f"cannot read {path}: {e}"]) from None


def check_document(jq_path: str, path: str, document: str) -> None:
    if not is_valid(jq_path, document):
        raise InvalidDocumentError(f"{path} is not valid JSON input for jq")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jqlive",
        description="Live jq preview over a JSON file (Textual). Enter copies the result.",
    )
    parser.add_argument("path", nargs="?", help="Path to the JSON document")
    parser.add_argument("--jq", help="jq executable (default: config value or 'jq' on PATH)")
    parser.add_argument("--config", help=f"Config file (default: {get_user_config_path()})")
    parser.add_argument("--theme", help="Rich syntax theme for the preview")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    parser.add_argument(
        "--list-shorthands",
        action="store_true",
        help="Print the shorthand table and exit",
    )
    return parser


def list_shorthands(config_path: Path | None) -> int:
    shorthands = build_shorthands(read_config(config_path).shorthands)
    width = max((len(name) for name in shorthands), default=0)
    for name, expr in shorthands.items():
        print(f"{name:<{width}}  {expr}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config_path = Path(args.config).expanduser() if args.config else None

    try:
        if args.list_shorthands:
            return list_shorthands(config_path)
        if not args.path:
            parser.error("the following arguments are required: path")

        config = load_config(config_path, jq=args.jq, theme=args.theme, log_file=args.log_file)
        setup_logging(args.log_level, config.log_file)
        log.info("jq resolved to %s", config.jq_path)

        document = read_document(args.path)
        check_document(config.jq_path, args.path, document)
    except ConfigError as e:
        print(f"jqlive: {e}", file=sys.stderr)
        return EXIT_CONFIG
    except InvalidDocumentError as e:
        print(f"jqlive: {e}", file=sys.stderr)
        return EXIT_INVALID_DOCUMENT

    # Import here so --help and precondition failures do not pay for Textual
    from jqlive.app import JqLiveApp

    app = JqLiveApp(config, document, source_name=args.path)
    app.run()
    if app.commit_error is not None:
        print(f"jqlive: {app.commit_error}", file=sys.stderr)
    elif app.notice:
        print(f"jqlive: {app.notice}", file=sys.stderr)
    return app.return_code or 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
