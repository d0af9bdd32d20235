import logging
import random
import time
from typing import Any, Callable, Tuple, Type

logger = logging.getLogger(__name__)


def retry_with_backoff(fn: Callable[[], Any],
                       retries: int = 3,
                       delay: float = 1.0,
                       retry_on: Tuple[Type[BaseException], ...] = (Exception,)) -> Any:
    """
    Call ``fn`` and retry it up to ``retries`` more times on failure.

    Waits ``delay * 2**attempt`` seconds (plus a little jitter) between
    attempts. The last exception is re-raised once retries are exhausted.
    """
    attempt = 0
    while True:
        try:
            return fn()
        except retry_on as e:
            if attempt >= retries:
                raise
            sleep_s = delay * (2 ** attempt)
            if sleep_s > 0:
                sleep_s += random.random() * 0.25
            logger.warning("retry %d/%d after error: %s (sleep %.2fs)", attempt + 1, retries, e, sleep_s)
            time.sleep(sleep_s)
            attempt += 1
