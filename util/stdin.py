import io
import select
import sys
from typing import Optional, TextIO


def _has_pending_input(stream: TextIO) -> bool:
    """True when reading from the stream would not block."""
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation):
        # in-memory streams never block
        return True

    ready, _, _ = select.select([fd], [], [], 0)
    return bool(ready)


def read_stdin(stream: Optional[TextIO] = None) -> str:
    """
    Reads a message piped on standard input.

    Returns an empty string straight away when stdin is closed, attached
    to an interactive terminal, or has nothing waiting to be read, so the
    caller never blocks. Bytes that aren't valid UTF-8 are replaced.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None or stream.closed or stream.isatty():
        return ""

    if not _has_pending_input(stream):
        return ""

    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        text = buffer.read().decode("utf-8", errors="replace")
    else:
        text = stream.read()

    return text.rstrip("\n")
