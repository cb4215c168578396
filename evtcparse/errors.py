"""Errors raised while parsing EVTC data."""


class ParseError(Exception):
    """Raised when EVTC data cannot be parsed."""


class UnsupportedRevisionError(ParseError):
    """Raised when a log uses an EVTC revision that is not supported."""

    def __init__(self, revision: int) -> None:
        super().__init__(f"unsupported evtc revision {revision}")
        self.revision = revision


class NotEvtcError(ParseError):
    """Raised when the data is not in EVTC format."""

    def __init__(self, message: str = "not in evtc format") -> None:
        super().__init__(message)