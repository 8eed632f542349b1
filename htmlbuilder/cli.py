"""Command-line interface for htmlbuilder."""

import argparse
import sys
from importlib import metadata
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .document import Document
from .element import CompositionError
from .models import PageSpec
from .page import build_document, find_unescaped, load_page_spec, page_to_string


def _load_page(path: Path) -> PageSpec:
    if not path.exists():
        raise SystemExit(f"Page file not found: {path}")
    try:
        return load_page_spec(path)
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid page spec in {path}: {exc}") from exc


def _build(path: Path, spec: PageSpec) -> Document:
    try:
        return build_document(spec)
    except (CompositionError, TypeError, ValueError) as exc:
        raise SystemExit(f"Invalid page structure in {path}: {exc}") from exc


def _handle_build(args: argparse.Namespace) -> None:
    page_path = Path(args.page)
    spec = _load_page(page_path)
    document = _build(page_path, spec)

    for problem in find_unescaped(document):
        print(f"[htmlbuilder] {page_path}: {problem}", file=sys.stderr)

    output = page_to_string(document, doctype=spec.doctype and not args.no_doctype)
    if args.out:
        output_path = Path(args.out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # Rendered markup always uses LF line endings.
        output_path.write_text(output, encoding="utf-8", newline="\n")
    else:
        sys.stdout.write(output)


def _handle_validate(args: argparse.Namespace) -> None:
    errors: list[str] = []
    checked = 0

    for page in args.pages:
        page_path = Path(page)
        try:
            spec = load_page_spec(page_path)
            build_document(spec)
        except OSError as exc:
            errors.append(f"{page_path}: {exc}")
            continue
        except (yaml.YAMLError, ValidationError) as exc:
            errors.append(f"{page_path}: {exc}")
            continue
        except (CompositionError, TypeError, ValueError) as exc:
            errors.append(f"{page_path}: invalid page structure: {exc}")
            continue
        checked += 1

    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        raise SystemExit(1)

    print(f"Validated {checked} page(s).")


def _version() -> str:
    try:
        return metadata.version("htmlbuilder")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlbuilder",
        description="Render declarative YAML page descriptions to indented HTML.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"htmlbuilder {_version()}",
        help="Show the htmlbuilder version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser(
        "build",
        help="Render a page.",
        description="Build the element tree described by a YAML page file and render it.",
    )
    build_parser.add_argument("page", help="Path to the page YAML file.")
    build_parser.add_argument(
        "--out",
        default=None,
        help="File to write the HTML to (default: standard output).",
    )
    build_parser.add_argument(
        "--no-doctype",
        dest="no_doctype",
        action="store_true",
        help="Do not write <!DOCTYPE html> before the document.",
    )
    build_parser.set_defaults(func=_handle_build)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check page files without rendering them.",
        description="Validate page files and the structure of their element trees.",
    )
    validate_parser.add_argument("pages", nargs="+", help="Page YAML files to check.")
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
