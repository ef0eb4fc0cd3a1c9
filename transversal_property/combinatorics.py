"""
Binomials and Combinations
==========================

Functions:
    binomial      -- number of k-subsets of an n-set
    combinations  -- lex-ordered table of the k-subsets of {1,...,n}

License: MIT
"""

import numpy as np

from transversal_property.intlist import IntList


def binomial(n, k):
    """Where n >= k >= 0, return the number of k-subsets of an n-set."""
    if n < k or k < 0:
        raise ValueError("Binomial error: n<k or k<0")
    if k == 0:
        return 1
    return (binomial(n - 1, k - 1) * n) // k


class CombinationTable:
    """The k-subsets of {1,...,n} in lex order, indexed starting at 1.

    Row i of `matrix` holds the i-th combination (row 0 is unused), so
    `matrix[idx]` gathers several combinations at once.
    """

    def __init__(self, n, k, matrix):
        self.n = n
        self.k = k
        self.matrix = matrix

    def __len__(self):
        return self.matrix.shape[0] - 1

    def __getitem__(self, i):
        if not 1 <= i <= len(self):
            raise IndexError(
                "combination index {} out of range 1..{}".format(i, len(self)))
        return IntList.from_values(self.matrix[i])

    def __iter__(self):
        for i in range(1, len(self) + 1):
            yield self[i]

    def index(self, subset):
        """1-based index of an increasing k-subset (inverse of []).

        Uses the combinatorial number system, so no search is needed.
        """
        subset = sorted(subset)
        if len(subset) != self.k:
            raise ValueError("subset must have size {}".format(self.k))
        idx = 1
        prev = 0
        for j, x in enumerate(subset, 1):
            if not prev < x <= self.n:
                raise ValueError("subset {} not within 1..{}".format(subset, self.n))
            # skip every combination whose j-th entry lies in prev+1..x-1
            for y in range(prev + 1, x):
                idx += binomial(self.n - y, self.k - j)
            prev = x
        return idx

    def __repr__(self):
        return "CombinationTable(n={}, k={}, {} subsets)".format(
            self.n, self.k, len(self))


def combinations(n, k):
    """Where n >= k >= 0, return a CombinationTable, in lex order (indexed
    starting at 1), of the k-subsets of {1,...,n} given as increasing lists.
    """
    if n < k or k < 0:
        raise ValueError("Combinations error: n<k or k<0")
    binom = binomial(n, k)
    comb = np.zeros((binom + 1, k), dtype=np.int64)
    if k == 0:
        return CombinationTable(n, k, comb)

    # columns are 0-based here: position j holds the (j+1)-th element
    comb[1] = np.arange(1, k + 1)
    for i in range(2, binom + 1):
        prev = comb[i - 1]
        for j in range(k - 1, -1, -1):
            if prev[j] < n - (k - 1 - j):
                comb[i, :j] = prev[:j]
                comb[i, j:] = np.arange(prev[j] + 1, prev[j] + 1 + k - j)
                break
    return CombinationTable(n, k, comb)
