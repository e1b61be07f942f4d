import argparse
import os
import sys

import serial

from nmeadump import __version__
from nmeadump.config import Config, config
from nmeadump.services import DumpService, console_lines, file_lines, serial_lines
from nmeadump.utils import Reporter


def build_parser(cfg=Config):
    parser = argparse.ArgumentParser(
        prog='nmeadump',
        description='NMEA Dump',
        epilog='If no file or port is specified, stdin is used to read data from.',
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('-p', '--port', help='Specifies the port to use.')
    source.add_argument('-f', '--file', help='Specifies the file to use.')
    parser.add_argument(
        '-s', '--speed', type=int, default=cfg.PORT_SPEED,
        help=f"Specifies the port speed. Valid values: {', '.join(map(str, cfg.VALID_PORT_SPEEDS))}",
    )
    parser.add_argument('--stats', action='store_true', default=cfg.SHOW_STATS,
                        help='Prints counters to stderr at end of input.')
    parser.add_argument('--plain', action='store_true',
                        help='Omits the category markers in front of lines.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def parse_options(argv=None, cfg=Config):
    """Parse and validate the command line. Exits on invalid combinations."""
    parser = build_parser(cfg)
    args = parser.parse_args(argv)
    if args.port and args.speed not in cfg.VALID_PORT_SPEEDS:
        parser.error(f"invalid port speed: {args.speed}")
    return args


def open_source(args, cfg=Config):
    """Open the line source selected on the command line."""
    if args.file:
        print(f"📂 Reading from file {args.file}", file=sys.stderr)
        return file_lines(args.file, cfg.FILE_ENCODING)
    if args.port:
        print(f"📡 Reading from {args.port} at {args.speed} baud", file=sys.stderr)
        return serial_lines(args.port, args.speed, cfg.SERIAL_TIMEOUT)
    return console_lines(encoding=cfg.FILE_ENCODING)


def print_stats(stats):
    print("📊 Statistics:", file=sys.stderr)
    for key, value in stats.items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                print(f"   - {sub_key}: {sub_value}", file=sys.stderr)
        else:
            print(f"   - {key}: {value}", file=sys.stderr)


def main(argv=None, cfg=None):
    """Main application entry point."""
    if cfg is None:
        config_name = os.environ.get('NMEADUMP_CONFIG', 'default')
        if config_name not in config:
            print(f"❌ Unknown configuration: {config_name}", file=sys.stderr)
            return 2
        cfg = config[config_name]
    args = parse_options(argv, cfg)

    try:
        lines = open_source(args, cfg)
    except (OSError, serial.SerialException) as e:
        print(f"❌ Cannot open input: {e}", file=sys.stderr)
        return 1

    reporter = Reporter(use_markers=cfg.USE_MARKERS and not args.plain)
    service = DumpService(cfg, reporter)

    exit_code = 0
    try:
        service.process(lines)
    except KeyboardInterrupt:
        print("\n🛑 Interrupted", file=sys.stderr)
        exit_code = 130

    if args.stats:
        print_stats(service.get_stats())
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
