class SpellbankError(Exception):
    """Base error for the word bank."""


class SourceUnavailableError(SpellbankError):
    """Raised by a word source when a tier, pack or override table cannot be fetched."""

    def __init__(self, what: str, reason: str = ""):
        self.what = what
        self.reason = reason
        message = f"Word source unavailable for {what}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
