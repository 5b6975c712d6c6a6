"""Loading and boundary checks for input word lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from ..core.exceptions import WordListError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


def parse_words_file(path: Path | str) -> List[str]:
    """Read words from a file, one per line. Blank lines and # comments are skipped."""

    entries: List[str] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def validate_words(words: Sequence[str]) -> None:
    """Reject word lists the search engines cannot handle.

    Letters are compared case-sensitively, so a list mixing cases is allowed
    but logged.
    """

    if not words:
        raise WordListError("Word list is empty")
    for position, word in enumerate(words):
        if not isinstance(word, str):
            raise WordListError(f"Entry {position} is not a string: {word!r}")
        if not word:
            raise WordListError(f"Entry {position} is an empty word")
        if any(char.isspace() for char in word):
            raise WordListError(f"Word {word!r} contains whitespace")
        if not word.isprintable():
            raise WordListError(f"Word {word!r} contains non-printable characters")

    cased = [word for word in words if word.upper() != word.lower()]
    if any(word.isupper() for word in cased) and any(not word.isupper() for word in cased):
        LOGGER.warning("Word list mixes letter cases; letters are compared case-sensitively")


def prepare_words(words: Iterable[str], normalize: bool = False) -> List[str]:
    """Optionally normalize ``words`` and validate the result."""

    prepared = list(words)
    if normalize:
        prepared = [clean_word(word) for word in prepared]
    validate_words(prepared)
    return prepared
