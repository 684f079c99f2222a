"""Exceptions raised by match_json."""


class MatchJsonError(Exception):
    """Base class for errors surfaced to callers."""


class ConversionError(MatchJsonError):
    """The document could not be converted; no output was produced.

    The underlying parse, navigation or serialization error is chained as
    ``__cause__``.
    """
