"""Unbalanced binary search tree storing :class:`Record` objects."""
import logging

from .errors import DuplicateKeyError, KeyNotFoundError
from .key import Key
from .node import BSTNode
from .record import Record

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Binary search tree ordered by :meth:`Key.compare`.

    No rebalancing is performed, so depth grows linearly when keys arrive
    already sorted.
    """

    def __init__(self) -> None:
        self._root: BSTNode | None = None
        self._size = 0

    @property
    def root(self) -> BSTNode | None:
        return self._root

    def _set_root(self, node: BSTNode | None) -> None:
        self._root = node
        if node is not None:
            node.parent = None

    # —— Search ——
    def get(self, node: BSTNode | None, key: Key) -> BSTNode | None:
        """Return the node storing ``key`` in the subtree rooted at ``node``."""
        while node is not None:
            cmp = key.compare(node.key)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None

    # —— Insertion ——
    def insert(self, record: Record) -> BSTNode:
        """Add ``record`` and return the node created for it.

        Raises :class:`DuplicateKeyError` if an equal key is already stored;
        the tree is not modified in that case.
        """
        key = record.key
        if self._root is None:
            new_node = BSTNode(record)
            self._set_root(new_node)
            self._size += 1
            logger.debug("Inserted %s as root", key)
            return new_node

        parent = self._root
        while True:
            cmp = key.compare(parent.key)
            if cmp == 0:
                raise DuplicateKeyError(f"A record with key {key} already exists.")
            child = parent.left if cmp < 0 else parent.right
            if child is None:
                break
            parent = child

        new_node = BSTNode(record)
        if cmp < 0:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1
        logger.debug("Inserted %s under %s", key, parent.key)
        return new_node

    # —— Removal ——
    def remove(self, key: Key) -> None:
        """Remove the node storing ``key``.

        Raises :class:`KeyNotFoundError` when ``key`` is not stored; the
        search fails before any link is rewritten.
        """
        parent = None
        node = self._root
        while node is not None:
            cmp = key.compare(node.key)
            if cmp == 0:
                break
            parent = node
            node = node.left if cmp < 0 else node.right
        if node is None:
            raise KeyNotFoundError(f"Key {key} not found.")

        replacement = self._replacement(node)
        if parent is None:
            self._set_root(replacement)
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        logger.debug("Removed %s", key)

    def _replacement(self, node: BSTNode) -> BSTNode | None:
        """Return the subtree that takes ``node``'s slot once it is removed."""
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        # Two children: keep this node, take the successor's record and
        # cut out the successor node, which has no left child.
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        node.record = successor.record
        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right
        return node

    # —— Ordered queries ——
    def successor(self, key: Key) -> BSTNode | None:
        """Return the node with the smallest key greater than ``key``.

        ``key`` does not need to be stored. When the matched node has no
        right subtree the answer is found by walking down again from the
        root, not by following parent links.
        """
        current = self.get(self._root, key)
        if current is not None and current.right is not None:
            return self.smallest(current.right)

        candidate = None
        ancestor = self._root
        while ancestor is not None and ancestor is not current:
            if key.compare(ancestor.key) < 0:
                candidate = ancestor
                ancestor = ancestor.left
            else:
                ancestor = ancestor.right
        return candidate

    def predecessor(self, key: Key) -> BSTNode | None:
        """Return the node with the largest key smaller than ``key``."""
        current = self.get(self._root, key)
        if current is not None and current.left is not None:
            return self.largest(current.left)

        candidate = None
        ancestor = self._root
        while ancestor is not None and ancestor is not current:
            if key.compare(ancestor.key) > 0:
                candidate = ancestor
                ancestor = ancestor.right
            else:
                ancestor = ancestor.left
        return candidate

    def smallest(self, node: BSTNode | None) -> BSTNode | None:
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def largest(self, node: BSTNode | None) -> BSTNode | None:
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size
