"""CLI entrypoints for docblockr commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, DocBlockrConfig, load_config
from .languages import UnknownLanguageError, available_languages
from .logging import configure_logging
from .parser import DocBlockParser

_LANGUAGE_BY_SUFFIX = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".php": "php",
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .docblockr.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--column-spacing",
        type=int,
        default=None,
        help="Spaces between docblock tag columns (overrides configuration).",
    )
    return_group = parser.add_mutually_exclusive_group()
    return_group.add_argument(
        "--return-tag",
        dest="return_tag",
        action="store_const",
        const=True,
        default=None,
        help="Emit an @return tag for functions.",
    )
    return_group.add_argument(
        "--no-return-tag",
        dest="return_tag",
        action="store_const",
        const=False,
        help="Never emit an @return tag.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docblockr",
        description="Generate docblock snippets from the line of code below the cursor.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a docblock for a single line of code.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    _add_render_options(render_parser)
    render_parser.add_argument(
        "line",
        help="Line of code to document; use '-' to read it from stdin.",
    )
    render_parser.add_argument(
        "--language",
        default="javascript",
        help="Language id of the code (defaults to javascript).",
    )

    file_parser = subparsers.add_parser(
        "file",
        help="Render a docblock for the line following a cursor position in a file.",
    )
    _add_verbose_option(file_parser, suppress_default=True)
    _add_render_options(file_parser)
    file_parser.add_argument("path", help="Source file to read.")
    file_parser.add_argument(
        "--line",
        type=int,
        required=True,
        help="1-based line number of the cursor; the next line is documented.",
    )
    file_parser.add_argument(
        "--language",
        default=None,
        help="Language id of the file (inferred from the suffix when omitted).",
    )

    languages_parser = subparsers.add_parser(
        "languages",
        help="List registered language ids.",
    )
    _add_verbose_option(languages_parser, suppress_default=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP completion service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docblockr commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "languages":
        for language in available_languages():
            print(language)
        return

    if args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"docblockr serve failed: {exc}\n")
        return

    try:
        config = _load_config(args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "render":
        line = sys.stdin.readline() if args.line == "-" else args.line
        language = args.language
        lines = [line]
        cursor = -1
    elif args.command == "file":
        path = Path(args.path)
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            parser.exit(1, f"Cannot read {path}: {exc}\n")
        language = args.language or _LANGUAGE_BY_SUFFIX.get(path.suffix.lower())
        if language is None:
            parser.exit(1, f"Cannot infer the language of {path}; pass --language.\n")
        cursor = args.line - 1
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        docblock = DocBlockParser(language, config=config)
    except UnknownLanguageError as exc:
        parser.exit(1, f"{exc}\n")
    print(docblock.render_after_cursor(lines, cursor))


def _load_config(args: argparse.Namespace) -> DocBlockrConfig:
    config = load_config(Path(args.config))
    if args.column_spacing is not None:
        config = replace(config, column_spacing=args.column_spacing)
    if args.return_tag is not None:
        config = replace(config, default_return_tag=args.return_tag)
    return config


if __name__ == "__main__":
    main(sys.argv[1:])
