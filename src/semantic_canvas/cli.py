#!/usr/bin/env python3
"""
Command-line interface for Semantic Canvas.

This is the top-level reporting point: every SemanticCanvasError, including
fatal graph integrity errors such as a dangling edge, is printed and turned
into exit code 1. Library callers of the services get those errors raised.

Usage:
    semantic-canvas push ~/vault Projects/Board.canvas
    semantic-canvas push ~/vault Projects/Board.canvas --append
    semantic-canvas build ~/vault "Projects/Launch plan.md"
    semantic-canvas pull ~/vault Projects/Board.canvas --note "Projects/Launch plan.md" --existing-only
"""

import argparse
import sys

from .core import UpdateMode
from .services import CanvasBuilderService, PropertySyncService, VaultRepository
from .shared import SemanticCanvasError, get_settings, setup_logging


def push_command(args):
    """Write canvas connections into note properties"""
    service = PropertySyncService(VaultRepository(args.vault))
    mode = UpdateMode.APPEND if args.append else UpdateMode.OVERWRITE

    result = service.push(args.canvas, mode=mode)
    if not result.success:
        print(f"❌ {result.notice}")
        return 1

    print(f"✅ {result.notice}")
    for path, props in result.file_properties.items():
        print(f"  • {path}: {', '.join(props)}")
    return 0


def build_command(args):
    """Create a canvas from a note's list properties"""
    service = CanvasBuilderService(VaultRepository(args.vault))

    result = service.create_canvas(args.note)
    for warning in result.warnings:
        print(f"⚠️ {warning}")

    if not result.success:
        print(f"❌ {result.notice}")
        return 1

    print(f"✅ {result.notice}")
    if result.canvas_path:
        print(f"📊 {result.nodes_created} nodes, {result.edges_created} edges")
    return 0


def pull_command(args):
    """Add note properties to an existing canvas"""
    service = CanvasBuilderService(VaultRepository(args.vault))

    result = service.pull(args.canvas, note_path=args.note, existing_only=args.existing_only)
    if not result.success:
        print(f"❌ {result.notice}")
        return 1

    print(f"✅ {result.notice}")
    if result.values_skipped:
        print(f"⏭️ Skipped {result.values_skipped} values with no node on the canvas")
    return 0


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog='semantic-canvas',
        description='Sync canvas connections with note properties'
    )
    parser.add_argument('--log-level', default=None, help='Logging level (default from settings)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Push command
    push_parser = subparsers.add_parser('push', help='Write canvas connections into note properties')
    push_parser.add_argument('vault', help='Path to the vault folder')
    push_parser.add_argument('canvas', help='Vault-relative canvas path')
    push_parser.add_argument('--append', action='store_true',
                             help='Keep existing values and add new ones instead of overwriting')
    push_parser.set_defaults(func=push_command)

    # Build command
    build_parser = subparsers.add_parser('build', help='Create a canvas from a note')
    build_parser.add_argument('vault', help='Path to the vault folder')
    build_parser.add_argument('note', help='Vault-relative note path')
    build_parser.set_defaults(func=build_command)

    # Pull command
    pull_parser = subparsers.add_parser('pull', help='Add note properties to an existing canvas')
    pull_parser.add_argument('vault', help='Path to the vault folder')
    pull_parser.add_argument('canvas', help='Vault-relative canvas path')
    pull_parser.add_argument('--note', default=None, help='Only pull this note (default: every note on the canvas)')
    pull_parser.add_argument('--existing-only', action='store_true',
                             help='Only connect to nodes already on the canvas')
    pull_parser.set_defaults(func=pull_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level or get_settings().log_level)

    try:
        return args.func(args)
    except SemanticCanvasError as e:
        print(f"❌ Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n⚠️ Operation cancelled by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
