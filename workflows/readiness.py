"""
Readiness polling for freshly started containers.
Probes are retried with exponential backoff until they pass or the timeout runs out.
"""

import time
from typing import Callable, Optional, Tuple

from setup_errors import ReadinessTimeoutError


def backoff_delays(initial_delay: float, max_delay: float, factor: float):
    """Yield delays starting at initial_delay, multiplied by factor, capped at max_delay"""
    delay = initial_delay
    while True:
        yield min(delay, max_delay)
        delay = min(delay * factor, max_delay)


def wait_until_ready(name: str, probe: Callable[[], Tuple[bool, str]], timeout: float = 120,
                     initial_delay: float = 1, max_delay: float = 10, factor: float = 2,
                     sleep=time.sleep, clock=time.monotonic, deadline: Optional[float] = None) -> int:
    """
    Poll probe until it reports success.

    Args:
        name: Probe name used in messages and errors
        probe: Callable returning (ready, detail)
        timeout: Seconds to keep trying
        deadline: clock() value to stop at, for waits sharing one timeout;
            defaults to clock() + timeout

    Returns:
        int: number of attempts it took

    Raises:
        ReadinessTimeoutError: probe still failing when the timeout elapsed
    """
    if deadline is None:
        deadline = clock() + timeout
    attempts = 0

    for delay in backoff_delays(initial_delay, max_delay, factor):
        attempts += 1
        ready, detail = probe()
        if ready:
            print(f"✅ {name} is ready (attempt {attempts})")
            return attempts

        remaining = deadline - clock()
        if remaining <= 0:
            print(f"❌ {name} not ready: {detail}")
            raise ReadinessTimeoutError(name, timeout, attempts)

        wait = min(delay, remaining)
        print(f"   Waiting for {name}... ({attempts}) {detail}".rstrip())
        sleep(wait)
