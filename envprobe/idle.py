# envprobe/idle.py
import sys
import time
import signal
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SLEEP_SECONDS = 60

TERMINATION_SIGNALS = (signal.SIGINT, signal.SIGTERM)

# Text printed when the wait is cut short.
SIGNAL_DESCRIPTIONS = {
    signal.SIGINT: "interrupt",
    signal.SIGTERM: "terminated",
}


class WaitOutcome(Enum):
    TIMED_OUT = "timed_out"
    INTERRUPTED = "interrupted"


@dataclass
class WaitResult:
    outcome: WaitOutcome
    received_signal: Optional[signal.Signals] = None

    @property
    def interrupted(self):
        return self.outcome is WaitOutcome.INTERRUPTED


class _SignalReceived(Exception):
    def __init__(self, signum):
        super().__init__(signum)
        self.signum = signum


def describe_signal(sig):
    return SIGNAL_DESCRIPTIONS.get(sig, sig.name)


def describe_duration(seconds):
    if seconds >= 60 and seconds % 60 == 0:
        minutes = int(seconds // 60)
        return f"{minutes} minute{'' if minutes == 1 else 's'}"
    return f"{seconds:g} second{'' if seconds == 1 else 's'}"


def wait_for_timeout_or_signal(duration, signals=TERMINATION_SIGNALS):
    """Block until ``duration`` seconds pass or one of ``signals`` arrives.

    Whichever happens first decides the result; anything after it is
    ignored. The previous handlers are back in place when this returns.
    Only callable from the main thread.
    """
    settled = []

    def handler(signum, frame):
        if settled:
            return
        settled.append(signum)
        raise _SignalReceived(signum)

    previous = {}
    try:
        for sig in signals:
            previous[sig] = signal.signal(sig, handler)
        time.sleep(duration)
        settled.append(None)
        return WaitResult(WaitOutcome.TIMED_OUT)
    except _SignalReceived as e:
        return WaitResult(WaitOutcome.INTERRUPTED, signal.Signals(e.signum))
    finally:
        for sig, old_handler in previous.items():
            signal.signal(sig, old_handler)


def sleep(duration=SLEEP_SECONDS, err=None):
    err = sys.stderr if err is None else err
    logger.info(f"Waiting up to {describe_duration(duration)} for a termination signal")

    result = wait_for_timeout_or_signal(duration)
    if result.interrupted:
        print(f"Sleep interrupted: {describe_signal(result.received_signal)}", file=err)
        logger.info(f"Wait interrupted by {result.received_signal.name}")
    else:
        logger.info("Wait timed out")
    return result
