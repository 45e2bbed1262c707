"""
Atomic Shadcn CLI - Command Line Interface

This module provides the command-line interface for atomic-shadcn.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from atomic_shadcn import __version__
from atomic_shadcn.config.config import configs
from atomic_shadcn.services.atomic_service import AtomicService
from atomic_shadcn.utils.exceptions import InvalidComponentIdError


def setup_logging(verbose: bool = False):
    """
    Configure loguru sinks for the application.

    Args:
        verbose: Enable verbose (DEBUG) logging

    Returns:
        Configured logger instance
    """
    level = "DEBUG" if verbose else "INFO"

    logger.remove()
    logger.add(sys.stdout, level=level, format="{message}")
    if configs.ATOMIC_LOG_FILE:
        logger.add(
            configs.ATOMIC_LOG_FILE,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
        )

    return logger


def validate_environment():
    """Validate required configuration."""
    try:
        configs.validate_layout_config()
    except ValueError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        print("\nPlease check the ATOMIC_* settings in your .env file or environment.", file=sys.stderr)
        sys.exit(1)


def _resolve_project(args: argparse.Namespace) -> Optional[Path]:
    project_path = Path(args.project_root)
    if not project_path.exists():
        logger.error(f"Project path does not exist: {project_path}")
        return None
    if not project_path.is_dir():
        logger.error(f"Project path is not a directory: {project_path}")
        return None
    return project_path


def run_command(args: argparse.Namespace) -> int:
    """
    Execute one atomic-shadcn operation.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    setup_logging(args.verbose)
    start_time = time.perf_counter()

    validate_environment()

    project_path = _resolve_project(args)
    if project_path is None:
        return 1

    service = AtomicService(project_path)
    component = getattr(args, "component", None)

    try:
        if args.command == "init":
            result = service.setup()
        elif args.command == "add":
            result = service.install_component(component, run_install=not args.skip_install)
        elif args.command == "organize":
            result = service.organize(component)
        elif args.command == "remove":
            result = service.remove(component)
        elif args.command == "uninstall":
            result = service.uninstall(component)
        elif args.command == "mapping":
            if args.json:
                print(service.describe())
                return 0
            result = service.show_mapping()
        else:
            result = service.debug()
    except InvalidComponentIdError as e:
        logger.error(f"❌ {e}")
        return 1

    elapsed = time.perf_counter() - start_time
    logger.debug(f"{result.operation} finished in {elapsed:.2f}s with counts {result.counts}")
    return 0 if result.success else 1


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='atomic-shadcn',
        description='Organize shadcn/ui components into atoms, molecules and organisms',
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'atomic-shadcn {__version__}'
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '--project-root', '-C',
        type=str,
        default='.',
        help='Project root containing package.json (default: current directory)'
    )
    common.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('init', parents=[common], help='Create the atomic folder structure')

    add_parser = subparsers.add_parser('add', parents=[common], help='Install a shadcn component and organize it')
    add_parser.add_argument('component', type=str, help='Component name, e.g. button or dropdown-menu')
    add_parser.add_argument(
        '--skip-install',
        action='store_true',
        help='Do not run the package installer after updating package.json'
    )

    organize_parser = subparsers.add_parser(
        'organize', parents=[common], help='Move components from ui/ into atomic folders'
    )
    organize_parser.add_argument('component', nargs='?', help='Only organize this component')

    remove_parser = subparsers.add_parser(
        'remove', parents=[common],
        help='Delete a component, or without a name remove the atomic-shadcn npm scripts'
    )
    remove_parser.add_argument('component', nargs='?', help='Component to delete')

    uninstall_parser = subparsers.add_parser(
        'uninstall', parents=[common],
        help='Move a component (or every component) back to ui/'
    )
    uninstall_parser.add_argument('component', nargs='?', help='Only uninstall this component')

    mapping_parser = subparsers.add_parser('mapping', parents=[common], help='Show the component classification')
    mapping_parser.add_argument('--json', action='store_true', help='Print the classification as JSON')

    subparsers.add_parser('debug', parents=[common], help='Print diagnostic information about the project')

    for subparser in subparsers.choices.values():
        subparser.set_defaults(func=run_command)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
