import logging
import os

from ..dictionary import BSTDictionary
from .records import create_record

logger = logging.getLogger(__name__)


def _read_lines(path: str) -> list[str]:
    """Return the lines of ``path``, decoded as UTF-8 or else Latin-1."""
    with open(path, "rb") as f:
        raw = f.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("%s is not valid UTF-8 (%s); reading it as Latin-1", path, exc.reason)
        text = raw.decode("latin-1")
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_dictionary(path: str, dictionary: BSTDictionary | None = None) -> BSTDictionary:
    """Populate ``dictionary`` from the seed file at ``path``.

    The file alternates label lines and data lines. Loading stops with
    :class:`DuplicateKeyError` on the first repeated key; ``OSError`` from
    opening or reading the file propagates unchanged.
    """
    if dictionary is None:
        dictionary = BSTDictionary()
    logger.info("Loading dictionary from %s", os.path.abspath(path))

    lines = _read_lines(path)
    for i in range(0, len(lines) - 1, 2):
        label, data = lines[i], lines[i + 1]
        dictionary.put(create_record(label, data))

    if len(lines) % 2 == 1:
        logger.warning(
            "Ignoring label %r on line %d: no data line follows", lines[-1], len(lines)
        )

    logger.info("Loaded %d records", len(dictionary))
    return dictionary
