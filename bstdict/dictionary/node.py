import weakref

from .key import Key
from .record import Record


class BSTNode:
    """Node of an unbalanced binary search tree.

    ``left`` and ``right`` own their subtrees. ``parent`` is only a weak
    back-reference and is re-established every time a child link is set.
    """

    __slots__ = ("record", "_left", "_right", "_parent", "__weakref__")

    def __init__(self, record: Record) -> None:
        self.record = record
        self._left: "BSTNode | None" = None
        self._right: "BSTNode | None" = None
        self._parent: "weakref.ref[BSTNode] | None" = None

    @property
    def key(self) -> Key:
        return self.record.key

    @property
    def left(self) -> "BSTNode | None":
        return self._left

    @left.setter
    def left(self, node: "BSTNode | None") -> None:
        self._left = node
        if node is not None:
            node.parent = self

    @property
    def right(self) -> "BSTNode | None":
        return self._right

    @right.setter
    def right(self, node: "BSTNode | None") -> None:
        self._right = node
        if node is not None:
            node.parent = self

    @property
    def parent(self) -> "BSTNode | None":
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: "BSTNode | None") -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    def __repr__(self) -> str:
        return f"BSTNode({self.record.key})"
