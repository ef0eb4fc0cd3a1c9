"""
Orbit Family Builders
=====================

Builders for concrete group orbits of k-subsets, used by the tests and
the experiment runner to produce checker input.

Permutations are lists of images indexed from 1 (entry 0 is unused and
set to 0), so p[x] is the image of the point x.

Functions:
    identity_perm, cycle_perm, mult_perm  -- permutation helpers
    cyclic_group, dihedral_group, symmetric_group -- generating sets
    coset_representatives  -- Schreier tree from point 1
    orbit_from_generators  -- OrbitData for the orbit of a base block
    complete_orbit         -- OrbitData for all k-subsets

License: MIT
"""

from collections import deque

from transversal_property.intlist import IntList
from transversal_property.combinatorics import combinations
from transversal_property.orbits import OrbitData


# =====================================================================
# PERMUTATIONS
# =====================================================================

def identity_perm(n):
    return list(range(n + 1))


def cycle_perm(n, cycle):
    """Return the given cycle acting on 1..n."""
    p = identity_perm(n)
    for i, j in zip(cycle, cycle[1:]):
        p[i] = j
    if cycle:
        p[cycle[-1]] = cycle[0]
    return p


def mult_perm(p, q):
    """Product p*q acting on the right: x -> q[p[x]]."""
    return [q[x] for x in p]


# =====================================================================
# GENERATING SETS
# =====================================================================

def cyclic_group(n):
    return [cycle_perm(n, list(range(1, n + 1)))]


def dihedral_group(n):
    """Symmetries of the n-gon with vertices 1..n in cyclic order."""
    reflection = identity_perm(n)
    for x in range(1, n + 1):
        reflection[x] = (n + 1 - x) % n + 1
    return cyclic_group(n) + [reflection]


def symmetric_group(n):
    gens = [cycle_perm(n, list(range(1, n + 1)))]
    if n > 2:
        gens.append(cycle_perm(n, [1, 2]))
    return gens


# =====================================================================
# ORBITS
# =====================================================================

def coset_representatives(n, generators):
    """For each point p, an element of the group mapping 1 to p.

    Returned as a list indexed by point (entry 0 is None) of IntList
    image tables. Breadth-first Schreier tree rooted at 1. Raises ValueError if the
    group is not transitive on 1..n.
    """
    reps = {1: identity_perm(n)}
    queue = deque([1])
    while queue:
        a = queue.popleft()
        for gen in generators:
            b = gen[a]
            if b in reps:
                continue
            reps[b] = mult_perm(reps[a], gen)
            queue.append(b)
    if len(reps) != n:
        raise ValueError("group is not transitive on 1..{}".format(n))
    return [None] + [IntList.from_values(reps[p][1:]) for p in range(1, n + 1)]


def _block_orbit(generators, base_block):
    start = tuple(sorted(base_block))
    seen = {start}
    queue = deque([start])
    while queue:
        block = queue.popleft()
        for gen in generators:
            image = tuple(sorted(gen[x] for x in block))
            if image not in seen:
                seen.add(image)
                queue.append(image)
    return seen


def orbit_from_generators(n, generators, base_block):
    """OrbitData for the orbit of base_block under <generators>.

    The group must be transitive on 1..n and base_block a set of k >= 2
    distinct points of 1..n.
    """
    k = len(set(base_block))
    if k != len(base_block):
        raise ValueError("base block has repeated points")
    if k < 2 or k > n:
        raise ValueError("bad input: must have 2<=k<=n")
    if any(not 1 <= x <= n for x in base_block):
        raise ValueError("base block not within 1..{}".format(n))
    cosetreps = coset_representatives(n, generators)
    comb = combinations(n, k - 1)
    adj = sorted(comb.index([x for x in block if x != 1])
                 for block in _block_orbit(generators, base_block)
                 if 1 in block)
    return OrbitData(n, k, cosetreps, adj, comb)


def complete_orbit(n, k):
    """All k-subsets of 1..n: the orbit of {1..k} under Sym(n)."""
    return orbit_from_generators(n, symmetric_group(n), range(1, k + 1))
