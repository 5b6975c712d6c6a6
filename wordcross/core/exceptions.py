"""Custom exception hierarchy for layout search."""


class CrosswordError(Exception):
    """Base exception for layout search failures."""


class WordListError(CrosswordError):
    """Raised when the input word list is malformed."""


class ValidationError(CrosswordError):
    """Raised when a candidate layout breaks a placement rule."""


class SearchLimitReached(CrosswordError):
    """Raised when a search runs out of its iteration or time budget."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Search stopped: {reason}")
        self.reason = reason
