from __future__ import annotations

from campaignbot.logging_setup import get_logger

_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 126
_SPAN = _LAST_PRINTABLE - _FIRST_PRINTABLE + 1


def _shift(text: str, key: str, sign: int) -> str:
    if not key:
        return text
    out: list[str] = []
    for i, ch in enumerate(text):
        code = ord(ch)
        if not _FIRST_PRINTABLE <= code <= _LAST_PRINTABLE:
            out.append(ch)
            continue
        offset = ord(key[i % len(key)]) * sign
        out.append(chr(_FIRST_PRINTABLE + (code - _FIRST_PRINTABLE + offset) % _SPAN))
    return "".join(out)


class ShiftEncoder:
    """Vigenere-style encoder over printable ASCII.

    - Each printable character is shifted by the code of the matching key character
    - Characters outside 32..126 pass through untouched
    - An empty key leaves the secret as is
    """

    def transform(self, secret: str, key: str) -> str:
        return _shift(secret, key, 1)

    def reverse(self, encoded: str, key: str) -> str:
        return _shift(encoded, key, -1)


class LoggingWeapon:
    def __init__(self, name: str = "megaweapon") -> None:
        self.name = name
        self.shots = 0
        self._logger = get_logger(self.__class__.__name__)

    def fire(self) -> None:
        self.shots += 1
        self._logger.warning("%s fired (shot #%d)", self.name, self.shots)


class RecordingHelper:
    """Helper that remembers what it was asked to do, in order."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.headquarters: str | None = None
        self._logger = get_logger(self.__class__.__name__)

    def build_at(self, location: str) -> None:
        self.calls.append("build_at")
        self.headquarters = location
        self._logger.info("Building headquarters in %s", location)

    def do_hard_work(self) -> None:
        self.calls.append("do_hard_work")
        self._logger.info("Doing the hard work")

    def fight(self) -> None:
        self.calls.append("fight")
        self._logger.info("Fighting enemies")


class NullScanner:
    def activate(self) -> None:
        pass
