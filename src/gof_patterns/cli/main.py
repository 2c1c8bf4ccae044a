"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing against the pattern registry
- Output formatting and error reporting
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from gof_patterns import __version__
from gof_patterns.catalog import PatternCategory, get_registry
from gof_patterns.config import ConfigurationManager, LoggingConfig
from gof_patterns.config.defaults import LogLevel, OutputFormat
from gof_patterns.exceptions import PatternException
from gof_patterns.infrastructure.logging import get_logger, setup_logging
from gof_patterns.cli.formatters import format_output

FORMAT_CHOICES = [f.value for f in OutputFormat]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gof-patterns",
        description="Browse and run the Gang-of-Four design pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all 23 patterns
  %(prog)s list --category behavioral        # List behavioral patterns only
  %(prog)s show flyweight                    # Show one pattern
  %(prog)s run observer                      # Run the observer demonstration
  %(prog)s --format json run --all           # Run everything, JSON output
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--log-level', choices=[lvl.value for lvl in LogLevel],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES,
                        help='Output format (default from configuration)')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='action', help='Available actions')

    list_parser = subparsers.add_parser('list', help='List patterns')
    list_parser.add_argument('--category', choices=[c.value for c in PatternCategory],
                             help='Filter by pattern category')

    show_parser = subparsers.add_parser('show', help='Show pattern details')
    show_parser.add_argument('name', help='Pattern name, e.g. factory-method')

    run_parser = subparsers.add_parser('run', help='Run a pattern demonstration')
    run_parser.add_argument('name', nargs='?', help='Pattern name to run')
    run_parser.add_argument('--all', action='store_true', help='Run every demonstration')

    return parser


def execute_command(args: argparse.Namespace) -> Dict[str, Any]:
    """Route a parsed command to the registry and return serialisable data."""
    registry = get_registry()

    if args.action == 'list':
        category = PatternCategory(args.category) if args.category else None
        return {"patterns": [info.to_dict() for info in registry.list_patterns(category)]}

    if args.action == 'show':
        return {"pattern": registry.get_pattern(args.name).to_dict()}

    if args.action == 'run':
        names = registry.get_registered_patterns() if args.all else [args.name]
        return {"results": [registry.run_demo(name).to_dict() for name in names]}

    raise PatternException(f"Unknown action: {args.action}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.action:
        parser.error("no action specified")
    if args.action == 'run' and not args.name and not args.all:
        parser.error("run needs a pattern name or --all")
    if args.action == 'run' and args.name and args.all:
        parser.error("run takes either a pattern name or --all, not both")

    # Defaults until the configuration is loaded, so config errors are logged too
    setup_logging()
    logger = get_logger(__name__)
    try:
        app_config = ConfigurationManager(args.config).app_config

        logging_config: LoggingConfig = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)

        result = execute_command(args)

        output_format = args.format or app_config.output.format.value
        formatted_output = format_output(result, output_format)

        if args.output:
            output_dir = os.path.dirname(args.output)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(formatted_output)
            if not args.quiet:
                print(f"Output written to {args.output}")
        else:
            print(formatted_output)

    except PatternException as e:
        logger.error("Command failed", action=args.action, error=str(e))
        if not args.quiet:
            print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error("Unexpected error", action=args.action, error=str(e))
        if not args.quiet:
            print(f"Unexpected error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
