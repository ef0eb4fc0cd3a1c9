"""
Transversal Property Checker
============================

Recursive branch-and-bound test of the transversal property.

Let (cosetreps, adj) represent a G-orbit of k-subsets of {1,...,n},
where G is a transitive group on {1,...,n} and k > 1. The (k-1)-subsets
extending a point i to a k-subset of the orbit are the images under
cosetreps[i] of the (k-1)-subsets indexed in comb by the entries of adj.

A represents an ordered k-partition [P_1,...,P_k] of {1,...,n}:
A[i] == j means that i lies in the j-th part P_j. R is a boolean array
over {1,...,n} representing a subset S of P_k.

transversal_property() returns True if for every k-partition Q with
    - Q_i containing P_i for i = 1,...,k-1,
    - no element of S in Q_k,
    - |Q_k| >= n/k,
some k-subset of the orbit is a transversal of Q, and False otherwise.

Preconditions (not checked):
    - A[newpoint] < k;
    - |P_1| + ... + |P_{k-1}| <= (k-1)n/k;
    - every orbit k-subset not containing newpoint which meets each of
      P_1,...,P_{k-1} in exactly one point has its remaining point in S.

A is modified during the search and restored before returning, so the
caller sees the partition it passed in. R is never modified.

License: MIT
"""

import numpy as np

from transversal_property.intlist import IntList
from transversal_property.combinatorics import CombinationTable


def rep_matrix(cosetreps, n):
    """Coset representatives as an (n+1) x (n+1) array of images.

    Row p is the image table of an element mapping 1 to p (row 0 and
    column 0 unused). Accepts a 2-D array in that layout already, or a
    sequence/dict indexed by point holding IntLists or lists of images.
    """
    if isinstance(cosetreps, np.ndarray) and cosetreps.ndim == 2:
        return cosetreps
    M = np.zeros((n + 1, n + 1), dtype=np.int64)
    for p in range(1, n + 1):
        rep = cosetreps[p]
        M[p, 1:] = rep.view() if isinstance(rep, IntList) else list(rep)
    return M


def _index_array(adj):
    if isinstance(adj, IntList):
        return adj.view().copy()
    return np.asarray(list(adj), dtype=np.int64)


def _comb_matrix(comb):
    if isinstance(comb, CombinationTable):
        return comb.matrix
    return np.asarray(comb, dtype=np.int64)


def transversal_property(n, k, cosetreps, adj, comb, A, R, newpoint,
                         stats=None):
    """Decide the transversal property for the partition A.

    Parameters
    ----------
    n, k : int
        Size of the point set and of the orbit subsets (k > 1).
    cosetreps : array or sequence
        Coset representatives, see rep_matrix().
    adj : IntList or sequence of int
        Indices into comb of the (k-1)-subsets completing point 1 to an
        orbit k-subset.
    comb : CombinationTable or array
        The (k-1)-subsets of {1,...,n} in lex order, indexed from 1.
    A : IntList or numpy.ndarray
        Part labels, 1-indexed. Changed during the call and restored.
    R : sequence of bool
        Forced set, 1-indexed (slot 0 ignored).
    newpoint : int
        The most recently placed point, with A[newpoint] < k.
    stats : SearchStats, optional
        Counters to update.

    Returns
    -------
    bool
    """
    reps = rep_matrix(cosetreps, n)
    # (k-1)-subsets completing point 1, one row per adjacency entry
    base = _comb_matrix(comb)[_index_array(adj)].reshape(-1, k - 1)
    parts = A.data if isinstance(A, IntList) else A
    forced = np.zeros(n + 1, dtype=bool)
    forced[1:] = np.asarray(R, dtype=bool)[1:n + 1]
    return _search(n, k, reps, base, parts, forced, newpoint, stats, 1)


def _search(n, k, reps, base, A, R, newpoint, stats, depth):
    if stats is not None:
        stats.nodes += 1
        stats.max_depth = max(stats.max_depth, depth)

    Acount = int(np.count_nonzero(A[1:n + 1] < k))
    Rnew = R.copy()
    Rnewcount = int(np.count_nonzero(Rnew))
    bound = (k - 1) * n

    # images under an element of G mapping 1 to newpoint: these together
    # with newpoint are exactly the orbit k-subsets containing newpoint
    images = reps[newpoint][base].tolist()
    labels = A.tolist()
    newpart = labels[newpoint]

    for image in images:
        if stats is not None:
            stats.candidates += 1
        hit = [labels[x] for x in image]
        # injective on parts: k-1 distinct labels, none equal to newpart,
        # so exactly one point of the image lies in P_k
        if newpart in hit or len(set(hit)) < k - 1:
            continue
        kpoint = image[hit.index(k)]
        if not Rnew[kpoint]:
            Rnew[kpoint] = True
            Rnewcount += 1
            if stats is not None:
                stats.forced_points += 1
            if (Acount + Rnewcount) * k > bound:
                if stats is not None:
                    stats.early_successes += 1
                return True

    if Rnewcount == 0:
        if stats is not None:
            stats.dead_ends += 1
        return False

    r = int(np.flatnonzero(Rnew)[0])
    Rnew[r] = False

    # r cannot stay in the last part, so try each of the first k-1
    for i in range(1, k):
        A[r] = i
        tp = _search(n, k, reps, base, A, Rnew, r, stats, depth + 1)
        A[r] = k
        if not tp:
            return False
    return True
