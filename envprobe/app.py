# envprobe/app.py
import os
import sys
import logging

from envprobe.reporter import print_banner, print_arguments, print_environment
from envprobe.dumper import DEFAULT_FILES, dump_files
from envprobe.idle import SLEEP_SECONDS, describe_duration, sleep

logger = logging.getLogger(__name__)


def get_config():
    return {
        'log_level': os.getenv('LOG_LEVEL', 'WARNING'),
        'sleep_seconds': SLEEP_SECONDS,
        'files': DEFAULT_FILES,
    }


def setup_logging(level_name):
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return level


def run(args, environ, files=DEFAULT_FILES, sleep_seconds=SLEEP_SECONDS, out=None, err=None):
    """Report arguments, environment and files, then idle. Returns the exit status."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    print_banner(out)
    print_arguments(args, out)
    print_environment(environ, out)

    failures = dump_files(files, out=out)
    if failures:
        logger.info(f"{failures} of {len(files)} file(s) could not be read")

    print(f"\nSleeping for {describe_duration(sleep_seconds)} to keep the container alive...", file=out)
    out.flush()

    sleep(sleep_seconds, err=err)

    # Interrupted and timed-out runs both exit 0.
    print("Done.", file=out)
    out.flush()
    return 0


def main(argv=None):
    config = get_config()
    setup_logging(config['log_level'])

    args = sys.argv[1:] if argv is None else argv
    logger.info(f"Starting envprobe with {len(args)} argument(s)")
    return run(
        args,
        os.environ,
        files=config['files'],
        sleep_seconds=config['sleep_seconds'],
    )


if __name__ == '__main__':
    sys.exit(main())
