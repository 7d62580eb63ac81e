# __main__.py

import sys
import argparse

from . import Interface, SessionSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='asciidraw',
        description='Draw points, lines, circles and rectangles on a text grid')
    parser.add_argument('script', nargs='?',
        help='File of commands to run instead of reading stdin')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    parser.add_argument('--max-dimension',
        type=int, default=SessionSettings.max_dimension,
        help='Largest accepted grid width or height')
    parser.add_argument('--char',
        default=SessionSettings.draw_color,
        help='Initial draw character')
    parser.add_argument('--no-prompt',
        action='store_true',
        help='Do not print the "> " prompt')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.char) != 1:
        parser.error('--char must be a single character')

    settings = SessionSettings(
        show_prompt=not args.no_prompt and args.script is None,
        draw_color=args.char,
        max_dimension=args.max_dimension,
    )

    if args.script is None:
        Interface(settings, logging_enabled=args.enable_logging, log_file=args.log_file).start()
        return 0

    try:
        script = open(args.script, encoding='utf-8')
    except OSError as e:
        print(f"error: cannot read {args.script}: {e.strerror}", file=sys.stderr)
        return 1
    with script:
        Interface(settings, logging_enabled=args.enable_logging,
                  log_file=args.log_file, input=script).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
