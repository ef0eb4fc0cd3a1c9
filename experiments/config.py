"""
Experiment configuration and job definitions.
=============================================

Default checker parameters and the queue of orbit instances to process.

Each job builds a G-orbit of k-subsets from a generating set and a base
block, then runs the checker on every short representative of length
k-1 starting at point 1 (enough by transitivity).
"""

from transversal_property.config import CheckerConfig


# --- Default checker parameters ---

DEFAULT_CONFIG = CheckerConfig(
    validate_orbit=True,
    validate_trials=True,
    stop_on_false=True,
    collect_stats=True,
    verbose=False,
)


# --- Job queue ---
# Each entry: (job_name, group_name, n, base_block)
# Ordered by increasing n within each group.

JOB_QUEUE = [
    # --- complete orbits: every k-subset, always a transversal ---
    ("Sym(6)-pairs",       "symmetric", 6,  (1, 2)),
    ("Sym(6)-triples",     "symmetric", 6,  (1, 2, 3)),
    ("Sym(8)-quads",       "symmetric", 8,  (1, 2, 3, 4)),

    # --- cycle graphs C_n as orbits of pairs ---
    ("C6-edges",           "cyclic",    6,  (1, 2)),
    ("C8-edges",           "cyclic",    8,  (1, 2)),
    ("C8-diagonals",       "cyclic",    8,  (1, 5)),

    # --- cyclic triples ---
    ("C7-(1,2,4)",         "cyclic",    7,  (1, 2, 4)),
    ("C9-(1,2,4)",         "cyclic",    9,  (1, 2, 4)),
    ("C9-(1,4,7)",         "cyclic",    9,  (1, 4, 7)),
    ("C12-(1,2,5)",        "cyclic",    12, (1, 2, 5)),

    # --- dihedral orbits ---
    ("D8-(1,2,4)",         "dihedral",  8,  (1, 2, 4)),
    ("D10-(1,2,4)",        "dihedral",  10, (1, 2, 4)),
    ("D12-(1,3,5,8)",      "dihedral",  12, (1, 3, 5, 8)),
]
