class LinkCardsError(Exception):
    """Base class for all link card errors."""


class ValidationError(LinkCardsError):
    """The request is missing something the caller can fix."""


class UpstreamError(LinkCardsError):
    """The link preview provider (or the gateway in front of it) failed."""


class PersistenceError(LinkCardsError):
    """A stored value could not be read back."""


class ParseError(PersistenceError):
    """A stored value is present but is not valid."""


class NameRequiredError(LinkCardsError):
    """A preview was requested before the user submitted a name."""


class RecordIndexError(LinkCardsError, IndexError):
    """No preview record exists at the requested position."""
