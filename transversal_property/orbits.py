"""
Orbit Data
==========

The read-only tables shared by every checker call: coset
representatives, the adjacency list of point 1 and the (k-1)-subset
table. Also expands the compact encoding back into the full orbit.

License: MIT
"""

import numpy as np
from scipy import sparse

from transversal_property.intlist import IntList
from transversal_property.combinatorics import combinations, binomial
from transversal_property.checker import rep_matrix


class OrbitData:
    """A G-orbit of k-subsets of {1,...,n} in compact form.

    cosetreps[p] is an element of G (image form) mapping 1 to p, and
    adj lists the indices in comb of the (k-1)-subsets S such that
    {1} | S lies in the orbit.
    """

    def __init__(self, n, k, cosetreps, adj, comb=None):
        if k < 2 or k > n:
            raise ValueError("bad input: must have 2<=k<=n")
        self.n = n
        self.k = k
        self.reps = rep_matrix(cosetreps, n)
        self.adj = adj if isinstance(adj, IntList) else IntList.from_values(adj)
        self._comb = comb

    @property
    def comb(self):
        if self._comb is None:
            self._comb = combinations(self.n, self.k - 1)
        return self._comb

    def cosetrep(self, p):
        return IntList.from_values(self.reps[p, 1:])

    def validate(self):
        """Structural checks of the encoding.

        Does not check that the representatives generate a group or that
        adj is invariant under the stabilizer of 1.
        """
        n, k = self.n, self.k
        if self.reps.shape != (n + 1, n + 1):
            raise ValueError("cosetreps must hold {} images of length {}".format(n, n))
        points = np.arange(1, n + 1)
        for p in range(1, n + 1):
            image = self.reps[p, 1:]
            if not np.array_equal(np.sort(image), points):
                raise ValueError(
                    "cosetreps[{}] is not a permutation of 1..{}".format(p, n))
            if image[0] != p:
                raise ValueError(
                    "cosetreps[{}] maps 1 to {}, not {}".format(p, image[0], p))
        binom = binomial(n, k - 1)
        seen = set()
        for idx in self.adj:
            if not 1 <= idx <= binom:
                raise ValueError(
                    "adjacency index {} out of range 1..{}".format(idx, binom))
            if idx in seen:
                raise ValueError("adjacency index {} repeated".format(idx))
            seen.add(idx)
            if 1 in self.comb.matrix[idx]:
                raise ValueError(
                    "adjacency index {} refers to a subset containing 1".format(idx))
        return True

    def blocks_through(self, point):
        """Orbit k-subsets containing point, as sorted tuples."""
        base = self.comb.matrix[self.adj.view()].reshape(-1, self.k - 1)
        images = self.reps[point][base]
        return sorted(tuple(sorted([point] + row)) for row in images.tolist())

    def blocks(self):
        """The whole orbit, sorted and without repeats."""
        found = set()
        for p in range(1, self.n + 1):
            found.update(self.blocks_through(p))
        return sorted(found)

    def incidence(self, blocks=None):
        """Block-by-point incidence matrix (point p in column p-1)."""
        if blocks is None:
            blocks = self.blocks()
        rows, cols = [], []
        for i, block in enumerate(blocks):
            for p in block:
                rows.append(i)
                cols.append(p - 1)
        vals = np.ones(len(rows), dtype=np.int64)
        return sparse.csr_matrix((vals, (rows, cols)),
                                 shape=(len(blocks), self.n))

    def to_tokens(self):
        """Header, cosetreps and adjacency in the text input format."""
        out = [self.n, self.k]
        for p in range(1, self.n + 1):
            out.append(self.n)
            out.extend(int(v) for v in self.reps[p, 1:])
        out.append(len(self.adj))
        out.extend(self.adj)
        return out

    def __repr__(self):
        return "OrbitData(n={}, k={}, {} blocks through each point)".format(
            self.n, self.k, len(self.adj))
