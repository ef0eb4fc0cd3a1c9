"""
Transversal Property
====================

Decides whether every admissible completion of a partial ordered
k-partition of {1,...,n} has a transversal in a given G-orbit of
k-subsets, where G is a transitive permutation group.

The orbit is given compactly by coset representatives of the
stabilizer of point 1 and the adjacency list of point 1 (indices into
the lex-ordered table of (k-1)-subsets).

License: MIT
"""

__version__ = "0.1.0"

from transversal_property.intlist import IntList, read_intlist, tokenize
from transversal_property.combinatorics import (
    binomial, combinations, CombinationTable,
)
from transversal_property.checker import transversal_property, rep_matrix
from transversal_property.config import CheckerConfig, SearchStats, TrialReport
from transversal_property.orbits import OrbitData
from transversal_property.families import (
    identity_perm,
    cycle_perm,
    mult_perm,
    cyclic_group,
    dihedral_group,
    symmetric_group,
    coset_representatives,
    orbit_from_generators,
    complete_orbit,
)
from transversal_property.reference import exhaustive_transversal_property
from transversal_property.driver import parse_input, run_trials, trial_partition
