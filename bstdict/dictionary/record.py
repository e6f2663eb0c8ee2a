from dataclasses import dataclass

from .key import Key


@dataclass(frozen=True)
class Record:
    """Immutable pairing of a :class:`Key` with an opaque data payload."""

    key: Key
    data: str
