from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = Path(__file__).resolve().parent / "data" / "en" / "replace.txt"

COMMENT_PREFIX = "#"
KEY_SEPARATOR = "="
ALTERNATIVE_SEPARATOR = "|"


class LoadError(Exception):
    """Raised when a wrong-word resource is missing, unreadable or malformed."""

    def __init__(self, message: str, *, source: str, line_number: int | None = None) -> None:
        location = source if line_number is None else f"{source}:{line_number}"
        super().__init__(f"{location}: {message}")
        self.source = source
        self.line_number = line_number


class WrongWordDictionary(Mapping[str, tuple[str, ...]]):
    """Immutable mapping of disallowed forms to their ordered replacements.

    Keys are stored exactly as given; callers normalize before looking up.
    """

    def __init__(self, entries: Mapping[str, Iterable[str]] | None = None, *, source: str = "<mapping>") -> None:
        frozen: dict[str, tuple[str, ...]] = {}
        for key, replacements in (entries or {}).items():
            values = tuple(replacements)
            if not values:
                raise LoadError(f"no replacements given for {key!r}", source=source)
            frozen[key] = values
        self._entries = MappingProxyType(frozen)

    def lookup(self, key: str) -> tuple[str, ...] | None:
        return self._entries.get(key)

    def get_wrong_words(self) -> WrongWordDictionary:
        return self

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"WrongWordDictionary({len(self)} entries)"


class DictionaryProvider(Protocol):
    """Supplies the wrong-word dictionary for one language variant."""

    def get_wrong_words(self) -> WrongWordDictionary:
        """Return the dictionary; the same instance on every call."""


def _split_fields(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(ALTERNATIVE_SEPARATOR)]


def parse_dictionary(lines: Iterable[str], *, source: str = "<memory>") -> WrongWordDictionary:
    """Parse ``wrong1|wrong2=replacement1|replacement2`` lines.

    Blank lines and ``#`` comments are skipped. When a disallowed form appears
    more than once the last line wins.
    """
    entries: dict[str, list[str]] = {}
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        parts = line.split(KEY_SEPARATOR)
        if len(parts) != 2:
            raise LoadError(
                f"expected exactly one {KEY_SEPARATOR!r} in {line!r}",
                source=source,
                line_number=line_number,
            )

        wrong_forms = _split_fields(parts[0])
        replacements = _split_fields(parts[1])
        if not all(wrong_forms):
            raise LoadError(f"empty wrong form in {line!r}", source=source, line_number=line_number)
        if not all(replacements):
            raise LoadError(f"empty replacement in {line!r}", source=source, line_number=line_number)

        for wrong_form in wrong_forms:
            if wrong_form in entries:
                logger.debug("%s:%s overrides earlier entry for %r", source, line_number, wrong_form)
            entries[wrong_form] = replacements

    return WrongWordDictionary(entries, source=source)


def load_dictionary(path: str | Path) -> WrongWordDictionary:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            dictionary = parse_dictionary(handle, source=str(path))
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read wrong words: {exc}", source=str(path)) from exc

    logger.info("loaded %s wrong words from %s", len(dictionary), path)
    return dictionary


class FileDictionaryProvider:
    """Loads a dictionary file on first use, exactly once per provider."""

    def __init__(self, path: str | Path = DEFAULT_DICTIONARY_PATH) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._dictionary: WrongWordDictionary | None = None

    @property
    def loaded(self) -> bool:
        return self._dictionary is not None

    def get_wrong_words(self) -> WrongWordDictionary:
        dictionary = self._dictionary
        if dictionary is not None:
            return dictionary
        with self._lock:
            if self._dictionary is None:
                self._dictionary = load_dictionary(self.path)
            return self._dictionary
