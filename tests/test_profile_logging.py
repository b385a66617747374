import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.profile_simulation import log_summary, run_simulation
from blockfall.timing import FrameTimer


def test_profiled_run_logs_update_timings(caplog):
    timer = FrameTimer()
    sim = run_simulation(300, timer, seed=3)

    with caplog.at_level(logging.INFO, logger="examples.profile_simulation"):
        summary = log_summary(timer, sim)

    names = [row["name"] for row in summary]
    assert "update" in names
    assert summary[names.index("update")]["count"] == 300
    assert "update: total=" in caplog.text
