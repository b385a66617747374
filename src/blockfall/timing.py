"""Per-frame section timing for the game loop."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional


@dataclass
class SectionStat:
    """Aggregated timings for one section of the frame."""

    count: int = 0
    total: float = 0.0
    max_time: float = 0.0

    def add(self, elapsed: float) -> None:
        self.count += 1
        self.total += elapsed
        if elapsed > self.max_time:
            self.max_time = elapsed

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0.0


class _Section:
    __slots__ = ("_timer", "_name", "_start")

    def __init__(self, timer: "FrameTimer", name: str) -> None:
        self._timer = timer
        self._name = name
        self._start: Optional[float] = None

    def __enter__(self) -> "_Section":
        if self._timer.enabled:
            self._start = self._timer._clock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self._timer._record(self._name, self._timer._clock() - self._start)
            self._start = None
        return False


class FrameTimer:
    """Collect how long the ``events``/``update``/``render`` phases take."""

    def __init__(self, *, clock: Optional[Callable[[], float]] = None, enabled: bool = True) -> None:
        self._clock = clock or time.perf_counter
        self.enabled = enabled
        self._stats: Dict[str, SectionStat] = {}

    def _record(self, name: str, elapsed: float) -> None:
        stat = self._stats.get(name)
        if stat is None:
            stat = SectionStat()
            self._stats[name] = stat
        stat.add(elapsed)

    def section(self, name: str) -> _Section:
        """Return a context manager timing ``name``."""

        return _Section(self, name)

    def reset(self) -> None:
        self._stats.clear()

    def summary(self) -> List[Dict[str, float | int]]:
        """Return one row per section, slowest total first."""

        items = sorted(self._stats.items(), key=lambda item: item[1].total, reverse=True)
        return [
            {
                "name": name,
                "count": stat.count,
                "total": stat.total,
                "average": stat.average,
                "max": stat.max_time,
            }
            for name, stat in items
        ]

    def format_summary(self) -> str:
        rows = self.summary()
        if not rows:
            return "No timings recorded."
        return "; ".join(
            f"{row['name']}: total={row['total'] * 1000.0:.3f}ms, "
            f"count={int(row['count'])}, avg={row['average'] * 1000.0:.3f}ms, "
            f"max={row['max'] * 1000.0:.3f}ms"
            for row in rows
        )
