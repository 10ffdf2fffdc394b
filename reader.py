"""
Input acquisition — supplies report lines from a file or standard input.

Strategy: a file path argument wins. Otherwise piped stdin is read, but the
first line must show up within STDIN_TIMEOUT_SECONDS so an idle pipe can't
hang the run. Once data starts flowing, reading continues to EOF.
"""

import queue
import sys
import threading
from typing import Iterator, Iterable

from category_data import STDIN_TIMEOUT_SECONDS

_EOF = object()


class NoInputError(Exception):
    """No usable input source, or stdin stayed silent past the timeout."""


def resolve_source(args: list[str], stdin=None) -> dict:
    """
    Decide where lines come from.

    args are the CLI arguments after the program name. The first one is a
    file path unless it starts with "-". Stdin only counts when it isn't a
    terminal.

    Returns:
        kind: "file" or "stdin"
        path: the file path (None for stdin)
    """
    stdin = stdin if stdin is not None else sys.stdin
    file_path = args[0] if args else None

    if file_path and not file_path.startswith("-"):
        return {"kind": "file", "path": file_path}

    if stdin is not None and not _is_tty(stdin):
        return {"kind": "stdin", "path": None}

    raise NoInputError("No input provided")


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if isatty else False
    except ValueError:
        # Closed stream
        return True


def read_file_lines(path: str) -> Iterator[str]:
    """Yield lines from a file. Open/read errors are reported and end the input."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            yield from f
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)


def read_stdin_lines(stream=None, timeout: float = STDIN_TIMEOUT_SECONDS) -> Iterator[str]:
    """
    Yield lines from stdin (or the given stream).

    Raises NoInputError if neither a line nor EOF arrives within timeout
    seconds. The timer is one-shot: after the first line we wait for as
    long as it takes.
    """
    stream = stream if stream is not None else sys.stdin
    lines: queue.Queue = queue.Queue()

    def pump():
        try:
            for line in stream:
                lines.put(line)
        except (OSError, ValueError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
        finally:
            lines.put(_EOF)

    threading.Thread(target=pump, name="stdin-reader", daemon=True).start()

    try:
        item = lines.get(timeout=timeout)
    except queue.Empty:
        raise NoInputError("No stdin data") from None

    while item is not _EOF:
        yield item
        item = lines.get()


def open_source(source: dict, stdin=None, timeout: float = STDIN_TIMEOUT_SECONDS) -> Iterable[str]:
    """Line iterable for a source returned by resolve_source()."""
    if source["kind"] == "file":
        return read_file_lines(source["path"])
    return read_stdin_lines(stdin, timeout)
