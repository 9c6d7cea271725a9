"""
Main CLI module.

Parses the demo name and global options, wires the application and prints
the demo result to standard output.
"""
import argparse
import sys
from typing import List, Optional

from patterns_demo._package import VERSION
from patterns_demo.bootstrap import Application
from patterns_demo.cli.formatters import format_output
from patterns_demo.config.manager import ConfigurationManager
from patterns_demo.domain.base.exceptions import DomainException
from patterns_demo.infrastructure.error.exception_handler import ExceptionHandler
from patterns_demo.interface.demo_handlers import DEMOS, run_demo


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="patterns-demo",
        description="Run one design pattern demo against an in-memory order domain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s repository                 # CRUD through the repository contract
  %(prog)s resource --format yaml     # Order views as YAML
  %(prog)s strategy --format table    # Delivery quotes as a table
        """
    )
    parser.add_argument('demo', choices=sorted(DEMOS), help='Demo to run')
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured log level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'], default='json',
                        help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = parse_args(argv)

    overrides = {"logging": {"level": args.log_level}} if args.log_level else None

    try:
        app = Application(config_manager=ConfigurationManager(args.config, overrides)).initialize()
    except DomainException as e:
        # No application yet, so no middleware either
        print(format_output(ExceptionHandler().handle_error(e).to_dict(), args.format))
        return 1

    result = run_demo(args.demo, app)
    print(format_output(result, args.format))
    return 1 if "error" in result else 0


if __name__ == "__main__":
    sys.exit(main())
