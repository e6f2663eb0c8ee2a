from .key import Key
from .record import Record
from .node import BSTNode
from .tree import BinarySearchTree
from .bst_dictionary import BSTDictionary
from .errors import DictionaryError, DuplicateKeyError, KeyNotFoundError

__all__ = [
    "Key",
    "Record",
    "BSTNode",
    "BinarySearchTree",
    "BSTDictionary",
    "DictionaryError",
    "DuplicateKeyError",
    "KeyNotFoundError",
]
