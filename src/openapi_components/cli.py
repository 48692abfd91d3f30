"""
CLI commands for inspecting and editing OpenAPI components.
"""

import argparse
import logging
import sys
from pathlib import Path

from .components import COMPONENT_KINDS
from .serialization import DocumentSerializer


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def cmd_inspect(args):
    """List component names per kind."""
    setup_logging(args.verbose)

    try:
        document = DocumentSerializer().load_document(args.path)
    except (OSError, ValueError) as e:
        print(f"✗ Failed to load {args.path}: {e}")
        return 1

    components = document.components
    title = document.info.get("title", "(untitled)")
    print(f"{title} (OpenAPI {document.openapi})")
    if components.is_empty():
        print("  no components")
        return 0
    for kind in COMPONENT_KINDS:
        names = list(components.collection(kind))
        if names:
            print(f"  {kind} ({len(names)}): {', '.join(names)}")
    return 0


def cmd_normalize(args):
    """Rewrite a document, dropping null entries and empty collections."""
    setup_logging(args.verbose)

    serializer = DocumentSerializer(indent=args.indent)
    try:
        document = serializer.load_document(args.path)
        output = Path(args.output or args.path)
        serializer.save_document(document, output)
    except (OSError, ValueError) as e:
        print(f"✗ Failed to normalize {args.path}: {e}")
        return 1
    print(f"✓ Wrote normalized document to: {output}")
    return 0


def cmd_remove(args):
    """Remove one component entry."""
    setup_logging(args.verbose)

    serializer = DocumentSerializer()
    try:
        document = serializer.load_document(args.path)
        removed = document.components.remove_component(args.kind, args.name)
        output = Path(args.output or args.path)
        serializer.save_document(document, output)
    except (OSError, ValueError) as e:
        print(f"✗ Failed to remove {args.kind}/{args.name}: {e}")
        return 1
    if removed:
        print(f"✓ Removed {args.kind}/{args.name}")
    else:
        print(f"○ {args.kind}/{args.name} was not present")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="OpenAPI components CLI",
        prog="openapi-components"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands"
    )

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="List the components of a JSON OpenAPI document"
    )
    inspect_parser.add_argument("path", type=Path, help="OpenAPI JSON document")
    inspect_parser.set_defaults(func=cmd_inspect)

    # Normalize command
    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Re-serialize a document (null entries dropped, empty collections omitted)"
    )
    normalize_parser.add_argument("path", type=Path, help="OpenAPI JSON document")
    normalize_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: overwrite input)"
    )
    normalize_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )
    normalize_parser.set_defaults(func=cmd_normalize)

    # Remove command
    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove one component entry"
    )
    remove_parser.add_argument("path", type=Path, help="OpenAPI JSON document")
    remove_parser.add_argument("kind", choices=COMPONENT_KINDS, help="Component kind")
    remove_parser.add_argument("name", help="Component name")
    remove_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: overwrite input)"
    )
    remove_parser.set_defaults(func=cmd_remove)

    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
