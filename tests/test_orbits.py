"""
Tests for orbit data, the orbit family builders and the exhaustive
reference predicate.
"""

import os
import sys
from itertools import combinations as itertools_combinations

import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from transversal_property.intlist import IntList
from transversal_property.orbits import OrbitData
from transversal_property.families import (
    identity_perm, cycle_perm, mult_perm,
    cyclic_group, dihedral_group, symmetric_group,
    coset_representatives, orbit_from_generators, complete_orbit,
)
from transversal_property.reference import (
    has_transversal, completions, exhaustive_transversal_property,
)


def _expect_error(fn, message):
    try:
        fn()
    except ValueError as e:
        assert message in str(e), str(e)
    else:
        raise AssertionError("expected ValueError containing {!r}".format(message))


# =====================================================================
# PERMUTATIONS AND GROUPS
# =====================================================================

def test_permutation_helpers():
    g = cycle_perm(4, [1, 2, 3])
    assert g == [0, 2, 3, 1, 4]
    assert mult_perm(g, identity_perm(4)) == g
    g3 = mult_perm(mult_perm(g, g), g)
    assert g3 == identity_perm(4)


def test_dihedral_reflection_fixes_one():
    rot, ref = dihedral_group(6)
    assert rot[1:] == [2, 3, 4, 5, 6, 1]
    assert ref[1:] == [1, 6, 5, 4, 3, 2]


def test_coset_representatives_map_one_to_point():
    for n, gens in [(5, cyclic_group(5)), (6, dihedral_group(6)),
                    (5, symmetric_group(5)), (2, symmetric_group(2))]:
        reps = coset_representatives(n, gens)
        assert reps[0] is None
        for p in range(1, n + 1):
            assert isinstance(reps[p], IntList)
            assert reps[p][1] == p
            assert sorted(reps[p]) == list(range(1, n + 1))


def test_intransitive_group_rejected():
    _expect_error(lambda: coset_representatives(4, [cycle_perm(4, [1, 2])]),
                  "not transitive")


# =====================================================================
# ORBIT DATA
# =====================================================================

def test_complete_orbit_blocks():
    orbit = complete_orbit(5, 3)
    assert len(orbit.adj) == 6
    assert orbit.blocks() == list(itertools_combinations(range(1, 6), 3))
    assert orbit.validate()


def test_fano_plane_incidence():
    orbit = orbit_from_generators(7, cyclic_group(7), (1, 2, 4))
    blocks = orbit.blocks()
    assert len(blocks) == 7
    assert (1, 2, 4) in blocks
    M = orbit.incidence()
    assert M.shape == (7, 7)
    assert np.all(np.asarray(M.sum(axis=0)).ravel() == 3)
    assert np.all(np.asarray(M.sum(axis=1)).ravel() == 3)
    # any two lines meet in exactly one point
    G = (M @ M.T).toarray()
    assert np.all(G[~np.eye(7, dtype=bool)] == 1)


def test_blocks_through_contain_point():
    orbit = orbit_from_generators(8, dihedral_group(8), (1, 2, 4))
    for p in range(1, 9):
        through = orbit.blocks_through(p)
        assert len(through) == len(orbit.adj)
        assert all(p in block for block in through)


def test_validate_rejects_bad_encodings():
    n, k = 4, 2
    good = orbit_from_generators(n, cyclic_group(n), (1, 2))
    reps = [None] + [good.cosetrep(p).tolist() for p in range(1, n + 1)]

    swapped = list(reps)
    swapped[2], swapped[3] = reps[3], reps[2]
    _expect_error(OrbitData(n, k, swapped, good.adj).validate, "maps 1 to")

    broken = list(reps)
    broken[2] = [2, 2, 3, 4]
    _expect_error(OrbitData(n, k, broken, good.adj).validate,
                  "not a permutation")

    _expect_error(OrbitData(n, k, reps, [2, 5]).validate, "out of range")
    _expect_error(OrbitData(n, k, reps, [1]).validate, "containing 1")
    _expect_error(OrbitData(n, k, reps, [2, 2]).validate, "repeated")


def test_orbit_data_rejects_bad_k():
    reps = coset_representatives(3, cyclic_group(3))
    _expect_error(lambda: OrbitData(3, 1, reps, []), "2<=k<=n")
    _expect_error(lambda: OrbitData(3, 4, reps, []), "2<=k<=n")


def test_base_block_checks():
    _expect_error(lambda: orbit_from_generators(5, cyclic_group(5), (1, 1)),
                  "repeated")
    _expect_error(lambda: orbit_from_generators(5, cyclic_group(5), (1, 6)),
                  "within")


def test_to_tokens_layout():
    orbit = orbit_from_generators(3, cyclic_group(3), (1, 2))
    tokens = orbit.to_tokens()
    assert tokens[:2] == [3, 2]
    assert tokens[2:6] == [3, 1, 2, 3]
    assert tokens[-3:] == [2, 2, 3]


# =====================================================================
# REFERENCE PREDICATE
# =====================================================================

def test_has_transversal():
    orbit = OrbitData(3, 2, coset_representatives(3, cyclic_group(3)), [2])
    M = orbit.incidence([(1, 2)])
    assert has_transversal(M, [1, 2, 2], 2)
    assert not has_transversal(M, [1, 1, 2], 2)


def test_completions_respect_constraints():
    A = IntList.from_values([1, 3, 3, 3, 3, 3])
    R = np.zeros(7, dtype=bool)
    R[2] = True
    found = list(completions(6, 3, A, R))
    assert found
    for labels in found:
        assert labels[0] == 1
        assert labels[1] in (1, 2)
        assert labels.count(3) * 3 >= 6


def test_exhaustive_counterexample():
    orbit = orbit_from_generators(4, cyclic_group(4), (1, 3))
    A = IntList.from_values([1, 2, 2, 2])
    R = np.zeros(5, dtype=bool)
    ok, labels = exhaustive_transversal_property(orbit, A, R)
    assert not ok
    assert labels[0] == 1


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
