"""
Red-Black Tree implementation for sorted key-value storage.

O(log N) put/get/delete with ascending iteration.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from ordmap.interfaces.sorted_container import SortedContainer
from ordmap.models.entry import Entry
from ordmap.models.exceptions import InvalidKeyError, InvariantViolationError

logger = logging.getLogger(__name__)


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """Node in the Red-Black Tree."""

    key: Any
    value: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None
    parent: "Node | None" = None


def _is_red(node: Node | None) -> bool:
    return node is not None and node.color == Color.RED


def _is_black(node: Node | None) -> bool:
    # Empty slots count as black
    return node is None or node.color == Color.BLACK


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Left subtree keys < node key < right subtree keys
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to an empty slot has the same number of black nodes

    The size counter is updated on every structural change and never
    recomputed by traversal.

    Removing a node with a right subtree copies its in-order successor's key and
    value into it and unlinks the successor's node instead, so Node identity is
    not stable across deletes.
    """

    def __init__(self, check_invariants: bool = False) -> None:
        """
        Initialize an empty tree.

        Args:
            check_invariants: Run verify() after every mutating call.
                              Debug aid; makes every mutation O(N).
        """
        self._root: Node | None = None
        self._size: int = 0
        self._check_invariants = check_invariants

    @property
    def check_invariants(self) -> bool:
        return self._check_invariants

    def put(self, key: Any, value: Any) -> Any | None:
        """Insert or update a key-value pair. O(log N)"""
        if key is None:
            raise InvalidKeyError("put")

        # Find insertion point
        parent = None
        current = self._root
        go_left = False

        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
                go_left = True
            elif key > current.key:
                current = current.right
                go_left = False
            else:
                # Key exists, update value
                old_value = current.value
                current.value = value
                return old_value

        # Insert new node
        new_node = Node(key=key, value=value, parent=parent)
        if parent is None:
            self._root = new_node
        elif go_left:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_insert(new_node)
        self._after_mutation()
        return None

    def get(self, key: Any) -> Any | None:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(key)
        return node.value if node else None

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        node = self._find_node(key)
        if node is None:
            return False

        self._delete_node(node)
        self._after_mutation()
        return True

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        logger.debug(f"Clearing red-black tree with {self._size} entries")
        self._root = None
        self._size = 0

    def update_values(self, fn: Callable[[Any, Any], Any]) -> None:
        """
        Replace every value with fn(key, value), visiting keys in ascending order.

        New values are written only after fn has succeeded for every entry,
        so an exception from fn leaves the tree unchanged.
        """
        nodes = list(self._in_order())
        new_values = [fn(node.key, node.value) for node in nodes]
        for node, new_value in zip(nodes, new_values):
            node.value = new_value
        self._after_mutation()

    def __iter__(self) -> Iterator[Entry]:
        return _AscendingIterator(self._root)

    def __aiter__(self) -> AsyncIterator[Entry]:
        return _AsyncAscendingIterator(self._root)

    def verify(self) -> int:
        """
        Check every red-black property and the parent back-references.

        Returns:
            The black-height of the tree (black nodes on any root-to-empty path).

        Raises:
            InvariantViolationError: On the first broken property found.
        """
        try:
            if self._root is not None:
                if self._root.parent is not None:
                    raise InvariantViolationError(
                        "root-parent", self._root.key, "root has a parent"
                    )
                if self._root.color != Color.BLACK:
                    raise InvariantViolationError("black-root", self._root.key)

            black_height, count = self._verify_subtree(self._root, None, None)
            if count != self._size:
                raise InvariantViolationError(
                    "size",
                    None,
                    f"counter says {self._size}, tree holds {count}",
                )
            return black_height
        except InvariantViolationError as e:
            logger.critical(f"Red-black tree corrupted: {e}")
            raise

    def _verify_subtree(
        self, node: Node | None, low: Any, high: Any
    ) -> tuple[int, int]:
        """Return (black-height, node count) of the subtree rooted at node."""
        if node is None:
            return 1, 0

        if low is not None and not low < node.key:
            raise InvariantViolationError(
                "bst-order", node.key, f"not greater than {low!r}"
            )
        if high is not None and not node.key < high:
            raise InvariantViolationError(
                "bst-order", node.key, f"not less than {high!r}"
            )

        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                raise InvariantViolationError(
                    "parent-link", child.key, "child does not point back to parent"
                )
            if node.color == Color.RED and child.color == Color.RED:
                raise InvariantViolationError(
                    "red-red", child.key, f"red child of red {node.key!r}"
                )

        left_height, left_count = self._verify_subtree(node.left, low, node.key)
        right_height, right_count = self._verify_subtree(node.right, node.key, high)
        if left_height != right_height:
            raise InvariantViolationError(
                "black-height",
                node.key,
                f"left {left_height} != right {right_height}",
            )

        own = 1 if node.color == Color.BLACK else 0
        return left_height + own, left_count + right_count + 1

    def _after_mutation(self) -> None:
        if self._check_invariants:
            self.verify()

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        if key is None:
            return None

        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _in_order(self) -> Iterator[Node]:
        """Yield nodes in ascending key order."""
        stack: list[Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while node.parent is not None and node.parent.color == Color.RED:
            parent = node.parent
            # A red parent is never the root, so the grandparent exists
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right

                if _is_red(uncle):
                    # Case 1: Uncle is red
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.right:
                    # Case 2: Node is the inner child
                    self._rotate_left(parent)
                    node = parent
                    parent = node.parent

                # Case 3: Node is the outer child
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left

                if _is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.left:
                    self._rotate_right(parent)
                    node = parent
                    parent = node.parent

                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)

        self._root.color = Color.BLACK

    def _rotate_left(self, node: Node) -> None:
        """Left rotation."""
        right_child = node.right

        node.right = right_child.left
        if right_child.left:
            right_child.left.parent = node

        right_child.parent = node.parent
        self._replace_in_parent(node, right_child)

        right_child.left = node
        node.parent = right_child

    def _rotate_right(self, node: Node) -> None:
        """Right rotation."""
        left_child = node.left

        node.left = left_child.right
        if left_child.right:
            left_child.right.parent = node

        left_child.parent = node.parent
        self._replace_in_parent(node, left_child)

        left_child.right = node
        node.parent = left_child

    def _replace_in_parent(self, node: Node, replacement: Node | None) -> None:
        """Point the slot holding node at replacement instead."""
        if node.parent is None:
            self._root = replacement
        elif node is node.parent.left:
            node.parent.left = replacement
        else:
            node.parent.right = replacement

    def _delete_node(self, node: Node) -> None:
        """Delete a node from the tree."""
        if node.right is not None:
            # Promote the in-order successor's mapping and unlink its node
            successor = node.right
            while successor.left is not None:
                successor = successor.left

            node.key = successor.key
            node.value = successor.value
            node = successor

        # Node has at most one child
        child = node.left if node.left is not None else node.right

        if node.color == Color.BLACK:
            if _is_red(child):
                child.color = Color.BLACK
            else:
                # Rebalance while the node still occupies its slot
                self._fix_delete(node)

        self._replace_in_parent(node, child)
        if child is not None:
            child.parent = node.parent

        node.parent = node.left = node.right = None
        self._size -= 1

    def _fix_delete(self, node: Node) -> None:
        """Fix Red-Black Tree properties for a black node about to be unlinked."""
        while node is not self._root and node.color == Color.BLACK:
            parent = node.parent

            if node is parent.left:
                sibling = parent.right

                if sibling.color == Color.RED:
                    # Case 1: Sibling is red
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right

                if _is_black(sibling.left) and _is_black(sibling.right):
                    # Case 2: Both nephews black, push the deficit up
                    sibling.color = Color.RED
                    node = parent
                else:
                    if _is_black(sibling.right):
                        # Case 3: Far nephew black, rotate it red
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = parent.right

                    # Case 4: Far nephew red
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(parent)
                    node = self._root
            else:
                sibling = parent.left

                if sibling.color == Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left

                if _is_black(sibling.left) and _is_black(sibling.right):
                    sibling.color = Color.RED
                    node = parent
                else:
                    if _is_black(sibling.left):
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = parent.left

                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(parent)
                    node = self._root

        node.color = Color.BLACK


class _AscendingIterator(Iterator[Entry]):
    """Lazy in-order iterator over a Red-Black Tree."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[Entry]:
        return self

    def __next__(self) -> Entry:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()
        result = Entry(node.key, node.value)

        # Push right subtree's left path
        self._push_left_path(node.right)

        return result

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left


class _AsyncAscendingIterator(AsyncIterator[Entry]):
    """Async in-order iterator over a Red-Black Tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __aiter__(self) -> "_AsyncAscendingIterator":
        return self

    async def __anext__(self) -> Entry:
        if not self._stack:
            raise StopAsyncIteration

        node = self._stack.pop()
        result = Entry(node.key, node.value)

        self._push_left_path(node.right)

        return result

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left
