"""Exceptions raised while decoding NMEA sentences.

Two kinds of failure are distinguished:

    ParsingError      the sentence is structurally unusable (too few fields
                      for its type)
    InvalidDataError  a field is present but fails format parsing or range
                      validation

Both derive from NMEAError so callers can catch a single base class. The base
itself derives from ValueError, matching how the field helpers already signal
unparseable input.
"""

__all__ = ["InvalidDataError", "NMEAError", "ParsingError"]


class NMEAError(ValueError):
    """Base class for all NMEA decoding failures."""


class ParsingError(NMEAError):
    """Sentence does not have the fields its type requires."""


class InvalidDataError(NMEAError):
    """A field is present but malformed or outside its valid domain."""
