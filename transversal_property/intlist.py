"""
Integer Lists
=============

1-indexed integer sequences with an explicit length, used for
permutation images, subsets and partition tables.

Slot 0 of the backing array is never used as data; the list itself is
x[1], ..., x[len(x)]. The length may be lowered or raised again up to
the allocated capacity, but the list is never resized.

License: MIT
"""

import numpy as np


class IntList:
    """A 1-indexed list of integers backed by a numpy array."""

    __slots__ = ("data", "_length")

    def __init__(self, length, capacity=None):
        if length < 0:
            raise ValueError(
                "IntList error: negative length given for a list")
        if capacity is None:
            capacity = length
        if capacity < length:
            raise ValueError("IntList error: capacity smaller than length")
        self.data = np.zeros(capacity + 1, dtype=np.int64)
        self._length = length

    @classmethod
    def from_values(cls, values):
        values = list(values)
        L = cls(len(values))
        if values:
            L.data[1:] = values
        return L

    @property
    def length(self):
        return self._length

    @length.setter
    def length(self, length):
        if length < 0:
            raise ValueError(
                "IntList error: negative length given for a list")
        if length > len(self.data) - 1:
            raise ValueError("IntList error: length exceeds capacity")
        self._length = length

    @property
    def capacity(self):
        return len(self.data) - 1

    def _check(self, i):
        if not 1 <= i <= self._length:
            raise IndexError(
                "IntList index {} out of range 1..{}".format(i, self._length))

    def __len__(self):
        return self._length

    def __getitem__(self, i):
        self._check(i)
        return int(self.data[i])

    def __setitem__(self, i, value):
        self._check(i)
        self.data[i] = value

    def __iter__(self):
        for i in range(1, self._length + 1):
            yield int(self.data[i])

    def __eq__(self, other):
        if isinstance(other, IntList):
            return self.tolist() == other.tolist()
        if isinstance(other, (list, tuple)):
            return self.tolist() == list(other)
        return NotImplemented

    __hash__ = None

    def view(self):
        """numpy view of x[1..length] (writes go through)."""
        return self.data[1:self._length + 1]

    def tolist(self):
        return [int(v) for v in self.view()]

    def copy(self):
        L = IntList(self._length, self.capacity)
        L.data[:] = self.data
        return L

    def __repr__(self):
        return "IntList({})".format(self.tolist())


def tokenize(text):
    """Split whitespace-separated text into an iterator of int tokens."""
    for tok in text.split():
        try:
            yield int(tok)
        except ValueError:
            raise ValueError("bad input: expected an integer, got {!r}".format(tok))


def read_int(tokens):
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("bad input: unexpected end of input")


def read_intlist(tokens):
    """Read an IntList from a token iterator.

    First the length is read, followed by the list elements (in order).
    """
    length = read_int(tokens)
    if length < 0:
        raise ValueError(
            "IntListRead error: negative length given for a list")
    L = IntList(length)
    for i in range(1, length + 1):
        L[i] = read_int(tokens)
    return L
