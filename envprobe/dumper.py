# envprobe/dumper.py
import sys
import logging

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 10 * 1024 * 1024  # 10 MiB

DEFAULT_FILES = (
    ("/config/configs.yaml", "Config File"),
    ("/config/secrets", "Secrets File"),
)


class LineTooLongError(ValueError):
    def __init__(self, path, line_number, limit):
        self.path = path
        self.line_number = line_number
        self.limit = limit
        super().__init__(
            f"line {line_number} of {path} exceeds the maximum length of {limit} bytes"
        )


def _iter_lines(f, path, max_line_length):
    """Yield raw lines split on ``\\n``, ``\\r\\n`` or ``\\r``, without their terminator.

    ``f`` is a binary file. Lines longer than ``max_line_length`` bytes raise
    LineTooLongError before any of their content is yielded.
    """
    line_number = 0
    carry = b""
    skip_lf = False
    while True:
        raw = f.readline(max_line_length + 1)
        if not raw:
            if carry:
                yield carry
            return
        if skip_lf:
            # \r\n split across two reads
            skip_lf = False
            if raw.startswith(b"\n"):
                raw = raw[1:]
                if not raw:
                    continue

        terminated = raw.endswith(b"\n")
        if terminated:
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        else:
            skip_lf = raw.endswith(b"\r")

        pieces = (carry + raw).split(b"\r")
        carry = b"" if terminated else pieces.pop()
        for piece in pieces:
            line_number += 1
            if len(piece) > max_line_length:
                raise LineTooLongError(path, line_number, max_line_length)
            yield piece
        if len(carry) > max_line_length:
            raise LineTooLongError(path, line_number + 1, max_line_length)


def _line_writer(out):
    """Return a callable printing one raw line to ``out``.

    Streams backed by a byte buffer (``sys.stdout``) get the bytes untouched.
    Pure text streams get them decoded with surrogateescape, so undecodable
    bytes survive as lone surrogates instead of being replaced.
    """
    buffer = getattr(out, "buffer", None)
    if buffer is not None:
        out.flush()

        def write(line):
            buffer.write(line + b"\n")
    else:
        def write(line):
            print(line.decode("utf-8", errors="surrogateescape"), file=out)
    return write


def dump_file(path, label, out=None, max_line_length=MAX_LINE_LENGTH):
    """Print ``path`` line by line under a ``<label> (<path>):`` header.

    Lines are written verbatim, minus their terminator. Open and read
    failures, including a line over ``max_line_length`` bytes, are reported
    as a single ``Failed to read`` line and never raised. Whatever was
    printed before a mid-stream failure stays printed; nothing after it is.

    Returns True if the whole file was printed.
    """
    out = sys.stdout if out is None else out
    print(f"\n{label} ({path}):", file=out)

    try:
        with open(path, "rb") as f:
            logger.debug(f"Opened {path}")
            write = _line_writer(out)
            for line in _iter_lines(f, path, max_line_length):
                write(line)
    except (OSError, LineTooLongError) as e:
        print(f"Failed to read {label} ({path}): {e}", file=out)
        logger.info(f"Failed to read {path}: {str(e)}")
        return False

    return True


def dump_files(files=DEFAULT_FILES, out=None):
    """Dump each ``(path, label)`` pair in order and return how many failed."""
    failures = 0
    for path, label in files:
        if not dump_file(path, label, out=out):
            failures += 1
    return failures
