"""
Exhaustive Reference Predicate
==============================

Evaluates the transversal property straight from its definition by
enumerating every admissible completion of the partition. Exponential
in the size of the last part; meant for cross-checking the recursive
checker on small instances.

License: MIT
"""

from itertools import product

import numpy as np


def has_transversal(incidence, labels, k):
    """Whether some block meets each of the k parts exactly once.

    incidence: sparse block-by-point matrix (point p in column p-1)
    labels: part label of each point 1..n, as a sequence of length n
    """
    onehot = np.zeros((len(labels), k), dtype=np.int64)
    onehot[np.arange(len(labels)), np.asarray(labels) - 1] = 1
    counts = incidence @ onehot  # blocks x parts
    return bool(np.any(np.all(counts == 1, axis=1)))


def completions(n, k, A, R):
    """Yield the label vectors (points 1..n) of all admissible Q.

    Points of P_1..P_{k-1} keep their part, points of S go to one of
    parts 1..k-1, the other points of P_k go anywhere, and
    k * |Q_k| >= n.
    """
    fixed = [int(A[p]) for p in range(1, n + 1)]
    free = [p for p in range(1, n + 1) if fixed[p - 1] == k]
    choices = [range(1, k) if R[p] else range(1, k + 1) for p in free]
    for assignment in product(*choices):
        labels = list(fixed)
        for p, part in zip(free, assignment):
            labels[p - 1] = part
        if labels.count(k) * k >= n:
            yield labels


def exhaustive_transversal_property(orbit, A, R, blocks=None):
    """Brute-force value of the transversal property.

    Returns (result, counterexample) where counterexample is the label
    vector of a completion without a transversal, or None.
    """
    incidence = orbit.incidence(blocks)
    for labels in completions(orbit.n, orbit.k, A, R):
        if not has_transversal(incidence, labels, orbit.k):
            return False, labels
    return True, None
