from datetime import timedelta
import logging
import threading
from typing import Callable, Union

logger = logging.getLogger(__name__)


def schedule(
    task: Callable[[], None], delay: Union[timedelta, float]
) -> threading.Timer:
    """
    Run ``task`` once on a background thread after ``delay``.

    Args:
        task (Callable[[], None]): The action to run.
        delay (Union[timedelta, float]): A timedelta or a number of seconds.

    Returns:
        threading.Timer: The started timer; ``cancel()`` it to prevent a
            pending execution.
    """
    if isinstance(delay, timedelta):
        delay = delay.total_seconds()
    if delay < 0:
        raise ValueError(f"Delay must not be negative: {delay}")

    def _run():
        try:
            task()
        except Exception:
            logger.error("Scheduled task %r failed", task, exc_info=True)

    timer = threading.Timer(delay, _run)
    timer.daemon = True
    logger.debug("Scheduling %r in %f seconds", task, delay)
    timer.start()
    return timer
