import argparse
import contextlib
import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from asciiart.acquisition import DEFAULT_WIDTH, STDIN_LOCATOR, decode, flatten, read_input, resize_to_width
from asciiart.charsets import ALPHABETS, DEFAULT_ALPHABET, alphabet_name, alphabet_names, get_alphabet
from asciiart.converter import render
from asciiart.errors import AsciiArtError, InvalidAlphabetName, OutputOpenError

log = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger = logging.getLogger("asciiart")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _alphabet(value: str) -> str:
    try:
        return get_alphabet(value)
    except InvalidAlphabetName as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciiart",
        description="Convert a picture into ASCII art",
        epilog=f"Recognized alphabets: {', '.join(alphabet_names())}",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Image file path or http(s) URL (default: read standard input, also '-')",
    )
    parser.add_argument("output", nargs="?", default=None, help="Output file path (default: standard output)")
    parser.add_argument(
        "-w", "--width", type=_positive_int, default=DEFAULT_WIDTH, help="Width of the output in columns (default: 80)"
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        type=_alphabet,
        default=DEFAULT_ALPHABET,
        help=f"Which alphabet to use (default: {alphabet_name(ALPHABETS[DEFAULT_ALPHABET])})",
    )
    parser.add_argument(
        "-t", "--timeout", type=float, default=None, help="HTTP timeout in seconds (default: wait indefinitely)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    return parser


def _is_stdout(path: str | None) -> bool:
    return path is None or path == STDIN_LOCATOR


@contextlib.contextmanager
def open_output(path: str | None) -> Iterator[TextIO]:
    """Open the output without touching an existing file's content.

    The file is opened for appending; callers truncate it once there is something to write.
    """
    if _is_stdout(path):
        yield sys.stdout
        return
    try:
        f = open(path, "a", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise OutputOpenError(path, exc) from exc
    with f:
        yield f


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    log.debug("using alphabet %s, width %d", alphabet_name(args.alphabet), args.width)

    try:
        data = read_input(args.input, timeout=args.timeout)
        with open_output(args.output) as out:
            image = resize_to_width(flatten(decode(data)), args.width)
            if not _is_stdout(args.output):
                out.truncate(0)
            render(image, args.alphabet, out)
    except AsciiArtError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    return 0
