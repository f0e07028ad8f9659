"""
csp-headers CLI
"""
import argparse
import json
import sys

from csp_headers.config.loader import get_settings
from csp_headers.exceptions import InvalidArgumentError
from csp_headers.header.content_security_policy import ContentSecurityPolicy
from csp_headers.logging_config import setup_logging
from csp_headers.presets import get_preset, load_presets


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog="csp-headers",
        description="Parse, validate and build Content-Security-Policy headers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a header line and print its directives
  python -m csp_headers parse "Content-Security-Policy: default-src 'self'; img-src *;"

  # Print the header line for a preset
  python -m csp_headers preset strict

  # Build a header from directive clauses
  python -m csp_headers build -d "default-src 'self'" -d "img-src 'self' data:"
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Parse command
    parse_parser = subparsers.add_parser('parse', help='Parse and validate a header line')
    parse_parser.add_argument('line', help='Full Content-Security-Policy header line')

    # Preset command
    preset_parser = subparsers.add_parser('preset', help='Print a preset header line')
    preset_parser.add_argument('name', nargs='?', help='Preset name (defaults to CSP_HEADER_PRESET)')
    preset_parser.add_argument('--list', action='store_true', help='List available presets')

    # Build command
    build_parser = subparsers.add_parser('build', help='Build a header from directives')
    build_parser.add_argument('-d', '--directive', action='append', default=[],
                              help="Directive clause, e.g. \"img-src 'self'\" (repeatable)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Settings loading logs; send it to stderr until the configured setup runs
    setup_logging()
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)

    try:
        if args.command == 'parse':
            return cmd_parse(args)
        elif args.command == 'preset':
            return cmd_preset(args)
        elif args.command == 'build':
            return cmd_build(args)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_parse(args):
    """Execute parse command"""
    csp = ContentSecurityPolicy.from_string(args.line)
    print(json.dumps(csp.directives, indent=2))
    return 0


def cmd_preset(args):
    """Execute preset command"""
    if args.list:
        for name in sorted(load_presets()):
            print(name)
        return 0
    print(get_preset(args.name).to_string())
    return 0


def cmd_build(args):
    """Execute build command"""
    csp = ContentSecurityPolicy()
    for clause in args.directive:
        tokens = clause.split()
        if not tokens:
            continue
        csp.set_directive(tokens[0], tokens[1:])
    print(csp.to_string())
    return 0


if __name__ == '__main__':
    sys.exit(main())
