"""
Shared pytest fixtures for ordered map tests.
"""

import random

import pytest

from ordmap.models.linked_list import LinkedList
from ordmap.models.ordered_map import OrderedMap
from ordmap.models.sortedcontainers import RedBlackTree


@pytest.fixture
def tree():
    """Provide an empty RedBlackTree that verifies itself after every mutation."""
    return RedBlackTree(check_invariants=True)


@pytest.fixture
def unchecked_tree():
    """Provide an empty RedBlackTree without automatic verification."""
    return RedBlackTree()


@pytest.fixture
def ordered_map():
    """Provide an empty OrderedMap that verifies its tree after every mutation."""
    return OrderedMap(check_invariants=True)


@pytest.fixture
def linked_list():
    """Provide an empty LinkedList."""
    return LinkedList()


@pytest.fixture
def rng():
    """Provide a seeded random generator so failures are reproducible."""
    return random.Random(20261019)


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [("a", 1), ("b", 2), ("c", 3)]


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(f"key{i:04d}", i) for i in range(1000)]
