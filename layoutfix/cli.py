#!/usr/bin/env python3
"""
layoutfix CLI entry point with enhanced logging
"""

from __future__ import annotations
import sys
import argparse
import os
import logging
import logging.handlers
import traceback
from pathlib import Path

from layoutfix.__version__ import __version__
from layoutfix.core import DEFAULT_REGISTRY, ConfigurationError, Language, transform_text

# Global logger instance
logger = None

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Setup logging to both console and file

    Args:
        debug: Enable debug level logging
        log_file: Path to log file (default: ~/.layoutfix.log)
    """
    global logger

    if logger is not None:
        return logger

    logger = logging.getLogger('layoutfix')
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if log_file is None:
        log_file = os.path.expanduser('~/.layoutfix.log')

    fmt = logging.Formatter(
        '[%(asctime)s] %(levelname)-8s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # File handler (rotate log file when it gets too large)
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    # Console handler (only warnings in production, all in debug)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    return logger


def _enable_debug(log: logging.Logger) -> None:
    """Raise verbosity after the config file turned debug on."""
    log.setLevel(logging.DEBUG)
    for handler in log.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    tags = [lang.value for lang in Language]
    parser = argparse.ArgumentParser(
        prog='layoutfix',
        description='Fix text typed with the wrong keyboard layout active',
    )
    parser.add_argument(
        'text',
        nargs='*',
        help='Text to convert (read from stdin when omitted)'
    )
    parser.add_argument(
        '-f', '--from',
        dest='lang_from',
        type=str.lower,
        choices=tags,
        default=None,
        help='Layout the text was typed in (default from config: eng)'
    )
    parser.add_argument(
        '-t', '--to',
        dest='lang_to',
        type=str.lower,
        choices=tags,
        default=None,
        help='Layout the text was meant for (default from config: ukr)'
    )
    parser.add_argument(
        '-s', '--swap',
        action='store_true',
        help='Switch source and target languages'
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='List supported languages and layout pairs'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Path to log file (default: ~/.layoutfix.log)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )
    return parser.parse_args(argv)


def resolve_languages(args: argparse.Namespace, config: dict) -> tuple[Language, Language]:
    """Pick the language pair from flags, falling back to config."""
    lang_from = Language.parse(args.lang_from or config['lang_from'])
    lang_to = Language.parse(args.lang_to or config['lang_to'])
    if args.swap:
        lang_from, lang_to = lang_to, lang_from
    return lang_from, lang_to


def read_text(args: argparse.Namespace, stdin=None) -> str:
    if args.text:
        return ' '.join(args.text)
    stream = stdin if stdin is not None else sys.stdin
    data = stream.read()
    if data.endswith('\r\n'):
        return data[:-2]
    if data.endswith('\n'):
        return data[:-1]
    return data


def validate_request(text: str, lang_from: Language, lang_to: Language) -> str | None:
    """Return a user-facing error message, or None if the request is valid."""
    if not text:
        return "Text is required"
    if lang_from == lang_to:
        return "Languages should be different"
    return None


def format_languages() -> str:
    lines = ["Languages:"]
    for lang in Language:
        lines.append(f"  {lang.value}  {lang.display_name}")
    lines.append("Pairs:")
    for src, dst in DEFAULT_REGISTRY.pairs():
        lines.append(f"  {src.value} -> {dst.value}")
    return '\n'.join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for layoutfix"""
    args = parse_args(argv)

    log = setup_logging(debug=args.debug, log_file=args.logfile)
    log.debug(f"layoutfix {__version__} started, PID {os.getpid()}")

    # Import after logging setup so config warnings reach the handlers
    from layoutfix.config import load_config

    log.debug(f"Loading config from: {args.config or 'default'}")
    config = load_config(args.config)
    if config['debug'] and not args.debug:
        _enable_debug(log)

    if args.list:
        print(format_languages())
        return EXIT_OK

    try:
        lang_from, lang_to = resolve_languages(args, config)
        text = read_text(args)

        error = validate_request(text, lang_from, lang_to)
        if error:
            log.warning(f"Rejected request: {error}")
            print(f"layoutfix: error: {error}", file=sys.stderr)
            return EXIT_USAGE

        log.debug(f"Converting {len(text)} chars {lang_from} -> {lang_to}")
        result = transform_text(text, lang_from, lang_to)
        print(result)
        log.info(f"✓ Converted {len(text)} chars {lang_from} -> {lang_to}")
        return EXIT_OK

    except ConfigurationError as e:
        log.error(f"❌ Layout configuration error: {e}")
        log.debug(traceback.format_exc())
        return EXIT_ERROR

    except KeyboardInterrupt:
        log.info("👋 layoutfix interrupted by user (Ctrl+C)")
        return EXIT_INTERRUPTED

    except BrokenPipeError:
        log.error("❌ Broken pipe error - pipeline was closed")
        log.debug(traceback.format_exc())
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
