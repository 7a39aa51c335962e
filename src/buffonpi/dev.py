"""Development helpers."""
import functools
import logging
import time

logger = logging.getLogger(__name__)


def timer(func):
    """Log the wall time of every call to ``func``."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        logger.info(f"{func.__name__} took {time.perf_counter() - start:.3f} s")
        return result
    return wrapper
