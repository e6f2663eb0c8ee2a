"""Classification of seed-file data lines into typed records."""
from enum import IntEnum

from ..dictionary import Key, Record


class RecordType(IntEnum):
    DEFINITION = 1
    TRANSLATION = 2
    SOUND = 3
    MUSIC = 4
    VOICE = 5
    IMAGE = 6
    ANIMATED_IMAGE = 7
    WEBPAGE = 8


# Indicator characters are stripped from the stored data.
_PREFIXES = (
    ("-", RecordType.SOUND),
    ("+", RecordType.MUSIC),
    ("*", RecordType.VOICE),
    ("/", RecordType.TRANSLATION),
)

_SUFFIXES = (
    (".gif", RecordType.ANIMATED_IMAGE),
    (".jpg", RecordType.IMAGE),
    (".html", RecordType.WEBPAGE),
)


def classify(type_data: str) -> tuple[RecordType, str]:
    """Return ``(type, data)`` for a raw data line."""
    for prefix, record_type in _PREFIXES:
        if type_data.startswith(prefix):
            return record_type, type_data[len(prefix):]
    for suffix, record_type in _SUFFIXES:
        if type_data.endswith(suffix):
            return record_type, type_data
    return RecordType.DEFINITION, type_data


def create_record(label: str, type_data: str) -> Record:
    record_type, data = classify(type_data)
    return Record(Key(label, int(record_type)), data)
