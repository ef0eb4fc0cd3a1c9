"""Configuration and search statistics."""

from dataclasses import dataclass, field, asdict


@dataclass
class CheckerConfig:
    """Parameters controlling how trials are run."""
    validate_orbit: bool = False
    validate_trials: bool = True
    stop_on_false: bool = True
    collect_stats: bool = False
    verbose: bool = False


@dataclass
class SearchStats:
    """Counters gathered during one or more checker calls.

    Attributes:
        nodes: number of checker calls (search tree nodes)
        max_depth: deepest recursion level reached (root is 1)
        early_successes: calls ended by the size bound
        dead_ends: calls ended because nothing was forced
        forced_points: points newly forced across all calls
        candidates: orbit k-subsets examined across all calls
    """
    nodes: int = 0
    max_depth: int = 0
    early_successes: int = 0
    dead_ends: int = 0
    forced_points: int = 0
    candidates: int = 0

    def merge(self, other):
        self.nodes += other.nodes
        self.max_depth = max(self.max_depth, other.max_depth)
        self.early_successes += other.early_successes
        self.dead_ends += other.dead_ends
        self.forced_points += other.forced_points
        self.candidates += other.candidates

    def to_dict(self):
        return asdict(self)


@dataclass
class TrialReport:
    """Outcome of a run over a sequence of trials."""
    result: bool = True
    trials_run: int = 0
    failed_trial: list = field(default_factory=list)
    stats: dict = field(default_factory=dict)
    timings: dict = field(default_factory=dict)

    def to_dict(self):
        return asdict(self)
