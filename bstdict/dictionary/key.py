from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Key:
    """Composite ``(label, type)`` identifier with a total order.

    Keys sort by ``label`` lexicographically and then by ``type`` ascending.
    The label is lowercased on construction, so ``Key("Apple", 1)`` and
    ``Key("apple", 1)`` are the same key.
    """

    label: str
    type: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "label", self.label.lower())

    def compare(self, other: "Key") -> int:
        """Return -1, 0 or 1 when this key is less, equal or greater."""
        if self.label != other.label:
            return -1 if self.label < other.label else 1
        if self.type != other.type:
            return -1 if self.type < other.type else 1
        return 0

    def __str__(self) -> str:
        return f"({self.label},{self.type})"
