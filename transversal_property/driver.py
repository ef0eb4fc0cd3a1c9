#!/usr/bin/env python3
"""
Trial Driver
============

Reads orbit data and trials in the whitespace-separated integer format,
runs the transversal property checker on each trial and prints 1 or 0.

Input:
    n k                      with 2 <= k <= n
    n length-prefixed lists  the coset representatives (images of 1..n)
    1 length-prefixed list   the adjacency list of point 1
    length-prefixed lists    short representatives, ended by a 0

Output: 1 if every trial run gave 1, otherwise 0. The trial loop stops
at the first trial giving 0 unless --all is given.

Usage:
    transversal-property < input.txt
    transversal-property --input input.txt --stats --json

License: MIT
"""

import sys
import json
import time
import argparse

import numpy as np

from transversal_property.intlist import IntList, tokenize, read_int, read_intlist
from transversal_property.orbits import OrbitData
from transversal_property.checker import transversal_property
from transversal_property.config import CheckerConfig, SearchStats, TrialReport


# --- Input ---

def parse_input(tokens):
    """Read the header, cosetreps and adjacency list.

    Returns (orbit, trials) where trials lazily yields the short
    representatives that follow, up to the terminating empty list.
    """
    tokens = iter(tokens)
    n = read_int(tokens)
    k = read_int(tokens)
    if k < 2 or k > n:
        raise ValueError("bad input: must have 2<=k<=n")
    cosetreps = [None]
    for p in range(1, n + 1):
        rep = read_intlist(tokens)
        if len(rep) != n:
            raise ValueError(
                "bad input: cosetreps[{}] has length {}, expected {}".format(
                    p, len(rep), n))
        cosetreps.append(rep)
    adj = read_intlist(tokens)
    orbit = OrbitData(n, k, cosetreps, adj)
    return orbit, _read_trials(tokens)


def _read_trials(tokens):
    while True:
        shortrep = read_intlist(tokens)
        if len(shortrep) == 0:
            return
        yield shortrep


def check_shortrep(n, k, shortrep):
    """Reject trials that would break the checker preconditions.

    A trial of length k puts its last point in part k, which is the
    same partition as the trial without that point.
    """
    if not 1 <= len(shortrep) <= k:
        raise ValueError(
            "bad trial {}: length must be between 1 and {}".format(
                list(shortrep), k))
    points = list(shortrep)
    if any(not 1 <= p <= n for p in points):
        raise ValueError(
            "bad trial {}: points must lie in 1..{}".format(points, n))
    if len(set(points)) != len(points):
        raise ValueError("bad trial {}: repeated point".format(points))


def trial_partition(n, k, shortrep):
    """Initial (A, R, newpoint) for a short representative.

    Point shortrep[i] goes to part i, all other points to part k, and
    the forced set is empty.
    """
    A = IntList(n)
    A.view()[:] = k
    for i, p in enumerate(shortrep, 1):
        A[p] = i
    R = np.zeros(n + 1, dtype=bool)
    return A, R, shortrep[1] if isinstance(shortrep, IntList) else shortrep[0]


# --- Trials ---

def run_trials(orbit, trials, config=None):
    """Run the checker on each trial; returns a TrialReport."""
    config = config or CheckerConfig()
    n, k = orbit.n, orbit.k
    if config.validate_orbit:
        orbit.validate()
    if sys.getrecursionlimit() < n + 100:
        sys.setrecursionlimit(n + 100)

    report = TrialReport()
    total = SearchStats() if config.collect_stats else None
    t0 = time.time()
    comb = orbit.comb
    report.timings["combinations"] = round(time.time() - t0, 6)

    t0 = time.time()
    for shortrep in trials:
        points = list(shortrep)
        if config.validate_trials:
            check_shortrep(n, k, points)
        A, R, newpoint = trial_partition(n, k, points)
        stats = SearchStats() if total is not None else None
        result = transversal_property(
            n, k, orbit.reps, orbit.adj, comb, A, R, newpoint, stats=stats)
        report.trials_run += 1
        report.result = report.result and result
        if stats is not None:
            total.merge(stats)
        if config.verbose:
            print("trial {}: {} -> {}".format(
                report.trials_run, points, int(result)), file=sys.stderr)
        if not result:
            if not report.failed_trial:
                report.failed_trial = points
            if config.stop_on_false:
                break
    report.timings["trials"] = round(time.time() - t0, 6)
    if total is not None:
        report.stats = total.to_dict()
    return report


# --- Entry point ---

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="transversal-property",
        description="Check the transversal property for a G-orbit of k-subsets")
    parser.add_argument("--input", "-i", default=None,
                        help="Read input from this file instead of stdin")
    parser.add_argument("--validate", action="store_true",
                        help="Check the structure of the orbit data first")
    parser.add_argument("--no-trial-checks", action="store_true",
                        help="Do not validate short representatives")
    parser.add_argument("--all", action="store_true",
                        help="Run every trial instead of stopping at the first 0")
    parser.add_argument("--stats", action="store_true",
                        help="Collect search statistics")
    parser.add_argument("--json", action="store_true",
                        help="Print a JSON report instead of 1 or 0")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print per-trial progress to stderr")
    args = parser.parse_args(argv)

    config = CheckerConfig(
        validate_orbit=args.validate,
        validate_trials=not args.no_trial_checks,
        stop_on_false=not args.all,
        collect_stats=args.stats,
        verbose=args.verbose,
    )

    try:
        if args.input:
            with open(args.input) as f:
                text = f.read()
        else:
            text = sys.stdin.read()
        orbit, trials = parse_input(tokenize(text))
        report = run_trials(orbit, trials, config)
    except (OSError, ValueError) as e:
        print("\n{}".format(e), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(int(report.result))
        if args.stats:
            for key, value in report.stats.items():
                print("{}: {}".format(key, value), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
