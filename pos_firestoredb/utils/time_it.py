import functools
import time

from .logger import logger


def time_it(func):
    """Log how long an async repository call took, at debug level."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(f"⏱️ {func.__qualname__} took {duration_ms:.2f} ms")

    return wrapper
