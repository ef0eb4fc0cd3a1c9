#!/usr/bin/env python3
"""
Transversal Property Experiment Runner
======================================

Processes a queue of orbit instances, running every short
representative through the checker and saving results as JSON.

Usage:
    python experiments/run_experiments.py              # all pending jobs
    python experiments/run_experiments.py --reset      # clear state and restart
    python experiments/run_experiments.py --job C6-edges

Ctrl+C to stop cleanly between jobs.
"""

import os
import sys
import json
import time
import signal
import argparse
from itertools import permutations

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from experiments.config import DEFAULT_CONFIG, JOB_QUEUE
from transversal_property.families import (
    cyclic_group, dihedral_group, symmetric_group, orbit_from_generators,
)
from transversal_property.driver import run_trials


# --- Paths ---

STATE_FILE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "state.json")
RESULTS_DIR = os.path.join(PROJECT_ROOT, "results")


# --- Job builder ---

GROUPS = {
    "cyclic": cyclic_group,
    "dihedral": dihedral_group,
    "symmetric": symmetric_group,
}


def build_job(group_name, n, base_block):
    """Return the OrbitData for a job."""
    if group_name not in GROUPS:
        raise ValueError(f"Unknown group: {group_name}")
    return orbit_from_generators(n, GROUPS[group_name](n), base_block)


def short_representatives(n, k):
    """Ordered (k-1)-tuples of distinct points starting with 1."""
    for rest in permutations(range(2, n + 1), k - 2):
        yield (1,) + rest


def result_filename(job_name):
    return job_name.replace("(", "_").replace(")", "").replace(",", "_") + ".json"


# --- Main runner ---

class ExperimentRunner:
    """Run queued orbit jobs, checkpointing finished job names.

    The checkpoint file records which jobs are done, so a rerun only
    processes the rest. request_stop() ends the run after the current
    job.
    """

    def __init__(self, config=None, jobs=None, state_file=STATE_FILE,
                 results_dir=RESULTS_DIR):
        self.config = config or DEFAULT_CONFIG
        self.jobs = jobs if jobs is not None else JOB_QUEUE
        self.state_file = state_file
        self.results_dir = results_dir
        self.completed = []
        self.stop_requested = False
        if os.path.exists(state_file):
            with open(state_file) as f:
                self.completed = json.load(f).get("completed", [])

    def _checkpoint(self, current=None):
        with open(self.state_file, "w") as f:
            json.dump({
                "completed": self.completed,
                "current": current,
                "updated_at": time.strftime("%Y-%m-%d %H:%M:%S"),
            }, f, indent=2)

    def request_stop(self):
        self.stop_requested = True

    def pending(self):
        return [job for job in self.jobs if job[0] not in self.completed]

    def run_job(self, job_name, group_name, n, base_block):
        orbit = build_job(group_name, n, base_block)
        report = run_trials(orbit, short_representatives(n, orbit.k),
                            self.config)
        result = {
            "job": job_name,
            "group": group_name,
            "n": n,
            "k": orbit.k,
            "base_block": list(base_block),
            "orbit_size": len(orbit.blocks()),
            "blocks_per_point": len(orbit.adj),
        }
        result.update(report.to_dict())
        return result

    def run(self):
        """Process pending jobs; returns the names finished in this run."""
        os.makedirs(self.results_dir, exist_ok=True)
        todo = self.pending()
        finished = []
        print(f"{len(todo)} pending, {len(self.completed)} done, "
              f"results in {self.results_dir}")

        for job_name, group_name, n, base_block in todo:
            if self.stop_requested:
                print("Stopped before", job_name)
                break
            self._checkpoint(current=job_name)
            try:
                result = self.run_job(job_name, group_name, n, base_block)
            except ValueError as e:
                print(f"{job_name}: skipped ({e})")
                continue

            path = os.path.join(self.results_dir, result_filename(job_name))
            with open(path, "w") as f:
                json.dump(result, f, indent=2)
            print(f"{job_name}: holds={int(result['result'])} "
                  f"orbit={result['orbit_size']} "
                  f"trials={result['trials_run']}")
            self.completed.append(job_name)
            finished.append(job_name)

        self._checkpoint()
        print(f"Completed: {len(self.completed)}/{len(self.jobs)}")
        return finished


# --- Entry point ---

def main():
    parser = argparse.ArgumentParser(description="Transversal Property Experiments")
    parser.add_argument("--reset", action="store_true",
                        help="Reset state and start from scratch")
    parser.add_argument("--job", action="append", default=None,
                        help="Run only the named job (repeatable)")
    args = parser.parse_args()

    if args.reset and os.path.exists(STATE_FILE):
        os.remove(STATE_FILE)

    jobs = JOB_QUEUE
    if args.job:
        jobs = [job for job in JOB_QUEUE if job[0] in args.job]
        if not jobs:
            parser.error("no such job: {}".format(", ".join(args.job)))

    runner = ExperimentRunner(jobs=jobs)
    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, lambda signum, frame: runner.request_stop())
    runner.run()


if __name__ == "__main__":
    main()
