# src/molmesh/utils/benchmarking.py

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class TimingStats:
    """Timings collected for one named stage."""

    name: str
    times: List[float] = field(default_factory=list)

    def add_timing(self, elapsed: float) -> None:
        self.times.append(elapsed)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def count(self) -> int:
        return len(self.times)

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"
        avg = self.total_time / self.count
        return f"{self.name}: Total: {self.total_time:.3f}s, Count: {self.count}, Avg: {avg:.3f}s"


class PerformanceStats:
    """Collect and report stage timings across several loads."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}

    def add_timing(self, name: str, elapsed: float) -> None:
        if name not in self.stats:
            self.stats[name] = TimingStats(name=name)
        self.stats[name].add_timing(elapsed)

    def report(self) -> str:
        """Generate a performance report."""
        if not self.stats:
            return "No performance data collected"
        return "\n".join(str(self.stats[name]) for name in sorted(self.stats))


@contextmanager
def timer(name: str, stats: Optional[PerformanceStats] = None):
    """Time a block, log the duration at DEBUG and optionally record it.

    Args:
        name: Name of the stage being timed
        stats: Optional PerformanceStats collecting the measurement
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug(f"{name} took {elapsed:.3f}s")
        if stats is not None:
            stats.add_timing(name, elapsed)
