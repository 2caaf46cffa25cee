"""
Profiling utilities for recordlens.

Provides a context manager and a decorator that measure:
- Wall-clock time (perf_counter)
- CPU usage (psutil)
- Peak RSS via a background sampling thread (psutil)

The dispatcher wraps every operation in `profile_block` so slow calls (the
lazy-evaluation demo sleeps on purpose) show up in the logs.

Usage examples:
    from recordlens.utils.profiler import profile_block

    with profile_block("multi_level_sort") as stats:
        engine.multi_level_sort()

    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import functools
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "duration_seconds": round(self.duration_seconds, 4),
            "peak_rss_bytes": self.peak_rss_bytes,
            "cpu_percent": round(self.cpu_percent, 1) if self.cpu_percent is not None else None,
        }


@contextlib.contextmanager
def profile_block(label: str, sample_interval_ms: int = 50) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    sample_interval_ms : int
        Interval in milliseconds for RSS sampling. Lower = more accurate but higher overhead.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    stop_sampling = threading.Event()
    peak_rss = process.memory_info().rss

    def _sample_memory() -> None:
        nonlocal peak_rss
        while not stop_sampling.is_set():
            try:
                peak_rss = max(peak_rss, process.memory_info().rss)
            except psutil.Error:
                break
            stop_sampling.wait(timeout=sample_interval_ms / 1000.0)

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)

    sampler = threading.Thread(target=_sample_memory, daemon=True)
    sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        stop_sampling.set()
        sampler.join(timeout=1.0)

        stats.peak_rss_bytes = peak_rss if peak_rss > 0 else None
        stats.cpu_percent = process.cpu_percent(interval=None)


def profile_function(
    label: Optional[str] = None,
    sample_interval_ms: int = 50,
) -> Callable[[Callable[..., Any]], Callable[..., tuple[Any, ProfileStats]]]:
    """
    Decorator that profiles a call and returns ``(result, stats)``.

    Example
    -------
        @profile_function("distinct-projects")
        def run():
            return engine.get_all_distinct_projects()

        projects, stats = run()
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., tuple[Any, ProfileStats]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> tuple[Any, ProfileStats]:
            tag = label or func.__name__
            with profile_block(tag, sample_interval_ms=sample_interval_ms) as stats:
                result = func(*args, **kwargs)
            return result, stats

        return wrapper

    return decorator


__all__ = ["ProfileStats", "profile_block", "profile_function"]
