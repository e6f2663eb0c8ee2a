import logging

from .errors import DuplicateKeyError, KeyNotFoundError
from .key import Key
from .record import Record
from .tree import BinarySearchTree

logger = logging.getLogger(__name__)


class BSTDictionary:
    """Ordered dictionary of :class:`Record` objects backed by a BST."""

    def __init__(self) -> None:
        self._tree = BinarySearchTree()

    def get(self, key: Key) -> Record | None:
        """Return the record stored under ``key`` or ``None``."""
        node = self._tree.get(self._tree.root, key)
        return node.record if node is not None else None

    def put(self, record: Record) -> None:
        """Insert ``record``; raise :class:`DuplicateKeyError` if its key exists."""
        try:
            self._tree.insert(record)
        except DuplicateKeyError as exc:
            logger.debug("Rejected duplicate key %s", record.key)
            raise DuplicateKeyError("Record with the same key already exists.") from exc

    def remove(self, key: Key) -> None:
        """Remove the record under ``key``; raise :class:`KeyNotFoundError` if absent."""
        try:
            self._tree.remove(key)
        except KeyNotFoundError as exc:
            logger.debug("Cannot remove missing key %s", key)
            raise KeyNotFoundError("Record not in the dictionary.") from exc

    def successor(self, key: Key) -> Record | None:
        """Record with the smallest key larger than ``key`` (``key`` may be absent)."""
        node = self._tree.successor(key)
        return node.record if node is not None else None

    def predecessor(self, key: Key) -> Record | None:
        """Record with the largest key smaller than ``key`` (``key`` may be absent)."""
        node = self._tree.predecessor(key)
        return node.record if node is not None else None

    def smallest(self) -> Record | None:
        node = self._tree.smallest(self._tree.root)
        return node.record if node is not None else None

    def largest(self) -> Record | None:
        node = self._tree.largest(self._tree.root)
        return node.record if node is not None else None

    def __len__(self) -> int:
        return len(self._tree)
