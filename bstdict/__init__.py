"""Ordered dictionary of ``(label, type)`` keyed records on a binary search tree."""
from .dictionary import (
    BSTDictionary,
    BSTNode,
    BinarySearchTree,
    DictionaryError,
    DuplicateKeyError,
    Key,
    KeyNotFoundError,
    Record,
)

__all__ = [
    "BSTDictionary",
    "BSTNode",
    "BinarySearchTree",
    "DictionaryError",
    "DuplicateKeyError",
    "Key",
    "KeyNotFoundError",
    "Record",
]
