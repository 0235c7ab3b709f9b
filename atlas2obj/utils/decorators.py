# atlas2obj/utils/decorators.py

import time
import functools
from typing import Callable, Any
from atlas2obj.utils.logger import Log


def measure_time(func: Callable) -> Callable:
    """실행 시간을 Log.performance 로 출력 (예외가 나도 측정값은 남김)"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start_time
            Log.performance(f"'{func.__name__}' took {elapsed:.4f} seconds")
    return wrapper


def log_lifecycle(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        owner = ""
        if args and not isinstance(args[0], (str, list, tuple)) and hasattr(args[0], func.__name__):
            owner = f"{args[0].__class__.__name__}."

        Log.trace(f"Starting: {owner}{func.__name__}")
        result = func(*args, **kwargs)
        Log.trace(f"Finished: {owner}{func.__name__}")
        return result
    return wrapper
