"""Line-oriented command interpreter over a :class:`BSTDictionary`."""
import logging
from typing import Callable, Iterable

from ..dictionary import BSTDictionary, DuplicateKeyError, Key, KeyNotFoundError, Record
from .records import RecordType

logger = logging.getLogger(__name__)


class MediaError(Exception):
    """Raised by a media handler that cannot open a media reference."""


MediaHandler = Callable[[RecordType, str], None]

# command -> (record type, message when the record is missing)
_TEXT_COMMANDS = {
    "define": (RecordType.DEFINITION, "The word {word} is not in the dictionary"),
    "translate": (RecordType.TRANSLATION, "There is no definition for the word {word}"),
}

_PLAY_COMMANDS = {
    "sound": (RecordType.SOUND, "There is no sound file for {word}"),
    "play": (RecordType.MUSIC, "There is no music file for {word}"),
    "say": (RecordType.VOICE, "There is no voice file for {word}"),
}

_SHOW_COMMANDS = {
    "show": (RecordType.IMAGE, "There is no image file for {word}"),
    "animate": (RecordType.ANIMATED_IMAGE, "There is no animated image file for {word}"),
    "browse": (RecordType.WEBPAGE, "There is no webpage called {word}"),
}


class CommandShell:
    """Execute dictionary commands and write their output through ``out``.

    Media commands do not launch players or viewers themselves; the stored
    reference is passed to ``media_handler``, which by default just echoes it.
    """

    def __init__(
        self,
        dictionary: BSTDictionary,
        media_handler: MediaHandler | None = None,
        out: Callable[[str], None] = print,
    ) -> None:
        self.dictionary = dictionary
        self.out = out
        self.media_handler = media_handler or self._echo_media

    def _echo_media(self, record_type: RecordType, data: str) -> None:
        logger.info("Media reference %s (%s)", data, record_type.name.lower())
        self.out(data)

    def run(self, lines: Iterable[str]) -> None:
        """Execute ``lines`` until ``exit`` or the input is exhausted."""
        for line in lines:
            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """Execute one command; return ``False`` when the shell should stop."""
        line = line.strip()
        if line == "exit":
            return False

        parts = line.split(" ")
        cmd = parts[0]
        word = parts[1] if len(parts) > 1 else ""
        type_ = -1
        if len(parts) >= 3:
            try:
                type_ = int(parts[2])
            except ValueError:
                self.out("Error: Type must be an integer.")
                return True
        data = " ".join(parts[3:])

        logger.debug("Executing %r", line)
        if cmd in _TEXT_COMMANDS:
            self._lookup(word, *_TEXT_COMMANDS[cmd])
        elif cmd in _PLAY_COMMANDS:
            self._media(word, *_PLAY_COMMANDS[cmd], failure="Error playing media")
        elif cmd in _SHOW_COMMANDS:
            self._media(word, *_SHOW_COMMANDS[cmd], failure="Error displaying media")
        elif cmd == "delete":
            self._delete(word, type_)
        elif cmd == "add":
            self._add(word, type_, data)
        elif cmd == "list":
            self._list(word)
        elif cmd == "first":
            self._show_record(self.dictionary.smallest())
        elif cmd == "last":
            self._show_record(self.dictionary.largest())
        else:
            self.out("Invalid command.")
        return True

    def _lookup(self, word: str, record_type: RecordType, missing: str) -> None:
        record = self.dictionary.get(Key(word, int(record_type)))
        if record is None:
            self.out(missing.format(word=word))
        else:
            self.out(record.data)

    def _media(self, word: str, record_type: RecordType, missing: str, *, failure: str) -> None:
        record = self.dictionary.get(Key(word, int(record_type)))
        if record is None:
            self.out(missing.format(word=word))
            return
        try:
            self.media_handler(record_type, record.data)
        except MediaError as exc:
            logger.warning("Media handler failed for %s: %s", record.key, exc)
            self.out(f"{failure}: {exc}")

    def _delete(self, word: str, type_: int) -> None:
        try:
            self.dictionary.remove(Key(word, type_))
        except KeyNotFoundError:
            self.out(f"No record in the ordered dictionary has key ({word},{type_}).")

    def _add(self, word: str, type_: int, data: str) -> None:
        key = Key(word, type_)
        if self.dictionary.get(key) is not None:
            self.out(
                f"Skipping addition: A record with the given key ({word},{type_}) "
                "already exists in the dictionary."
            )
            return
        try:
            self.dictionary.put(Record(key, data))
        except DuplicateKeyError as exc:
            self.out(f"Error adding record: {exc}")

    def _list(self, prefix: str) -> None:
        labels = []
        record = self.dictionary.smallest()
        while record is not None:
            if record.key.label.startswith(prefix):
                labels.append(record.key.label)
            record = self.dictionary.successor(record.key)
        if labels:
            self.out(", ".join(labels))
        else:
            self.out(f"No label attributes in the dictionary start with prefix {prefix}")

    def _show_record(self, record: Record | None) -> None:
        if record is None:
            self.out("The dictionary is empty.")
            return
        self.out(f"{record.key.label},{record.key.type},{record.data}")
