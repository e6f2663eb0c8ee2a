from .records import RecordType, classify, create_record
from .loader import load_dictionary
from .commands import CommandShell, MediaError

__all__ = [
    "RecordType",
    "classify",
    "create_record",
    "load_dictionary",
    "CommandShell",
    "MediaError",
]
