class DictionaryError(Exception):
    """Base class for ordered dictionary failures."""


class DuplicateKeyError(DictionaryError):
    """Raised when inserting a record whose key is already stored."""


class KeyNotFoundError(DictionaryError):
    """Raised when removing a key that is not stored."""
