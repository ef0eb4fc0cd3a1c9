"""
Tests for the resumable experiment runner.
"""

import os
import sys
import json
import tempfile

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from experiments.run_experiments import (
    ExperimentRunner, short_representatives, result_filename,
)


C6_EDGES = ("C6-edges", "cyclic", 6, (1, 2))


def _runner(tmp, jobs):
    return ExperimentRunner(
        jobs=jobs,
        state_file=os.path.join(tmp, "state.json"),
        results_dir=os.path.join(tmp, "results"))


def test_short_representatives_start_at_one():
    reps = list(short_representatives(4, 3))
    assert reps == [(1, 2), (1, 3), (1, 4)]
    assert len(list(short_representatives(5, 4))) == 4 * 3
    assert list(short_representatives(6, 2)) == [(1,)]


def test_run_writes_result_and_checkpoint():
    with tempfile.TemporaryDirectory() as tmp:
        runner = _runner(tmp, [C6_EDGES])
        assert runner.run() == ["C6-edges"]

        path = os.path.join(tmp, "results", result_filename("C6-edges"))
        with open(path) as f:
            result = json.load(f)
        assert result["job"] == "C6-edges"
        assert result["k"] == 2
        assert result["orbit_size"] == 6
        assert result["trials_run"] == 1
        assert result["result"] is True

        with open(os.path.join(tmp, "state.json")) as f:
            state = json.load(f)
        assert state["completed"] == ["C6-edges"]
        assert state["current"] is None


def test_rerun_skips_completed_jobs():
    with tempfile.TemporaryDirectory() as tmp:
        _runner(tmp, [C6_EDGES]).run()
        again = _runner(tmp, [C6_EDGES])
        assert again.completed == ["C6-edges"]
        assert again.pending() == []
        assert again.run() == []


def test_stop_request_ends_run_before_next_job():
    with tempfile.TemporaryDirectory() as tmp:
        runner = _runner(tmp, [C6_EDGES])
        runner.request_stop()
        assert runner.run() == []
        assert runner.pending() == [C6_EDGES]


def test_bad_job_is_skipped_and_left_pending():
    with tempfile.TemporaryDirectory() as tmp:
        bad = ("bad-group", "alternating", 6, (1, 2))
        runner = _runner(tmp, [bad, C6_EDGES])
        assert runner.run() == ["C6-edges"]
        assert runner.pending() == [bad]


if __name__ == "__main__":
    failed = 0
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            try:
                fn()
                print("  [PASS] {}".format(name))
            except AssertionError as e:
                failed += 1
                print("  [FAIL] {}: {}".format(name, e))
    sys.exit(1 if failed else 0)
