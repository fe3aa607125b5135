# envprobe/reporter.py
import sys
import logging
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)

BANNER = "Java-args-env-file V4"


def print_banner(out=None):
    out = sys.stdout if out is None else out
    print(BANNER, file=out)
    print(file=out)


def print_arguments(args: Sequence[str], out=None):
    """Print each argument as ``arg[i]: value`` in the order received."""
    out = sys.stdout if out is None else out
    print("Command Line Arguments:", file=out)
    for i, arg in enumerate(args):
        print(f"arg[{i}]: {arg}", file=out)
    logger.debug(f"Reported {len(args)} argument(s)")


def print_environment(environ: Mapping[str, str], out=None):
    """Print each entry of ``environ`` as ``KEY=VALUE``.

    Entries come out in whatever order the mapping iterates. For
    ``os.environ`` that order is host-dependent and unspecified; it is
    printed as-is and never sorted.
    """
    out = sys.stdout if out is None else out
    print("\nEnvironment Variables:", file=out)
    count = 0
    for key, value in environ.items():
        print(f"{key}={value}", file=out)
        count += 1
    logger.debug(f"Reported {count} environment variable(s)")
