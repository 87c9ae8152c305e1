"""Sentence classification and tokenization.

Classification looks only at the leading tag; it does not check length or
checksum. Tokenization splits on commas with no escaping, since NMEA fields
never contain commas.
"""

from gnss_analyzer.nmea.types import SentenceType

__all__ = ["classify_sentence", "split_fields"]

_SENTENCE_TAGS = {
    "$GPGGA": SentenceType.GGA,
    "$GPGSV": SentenceType.GSV,
}
_TAG_LENGTH = 6


def classify_sentence(line: str) -> SentenceType:
    """Identify the decoder for a raw NMEA line from its 6-character tag.

    Example:
        >>> classify_sentence("$GPGSV,3,1,11,03,03,111,00*74")
        <SentenceType.GSV: 2>
        >>> classify_sentence("$GPRMC,123519,A,...")
        <SentenceType.UNKNOWN: 0>
    """
    return _SENTENCE_TAGS.get(line[:_TAG_LENGTH], SentenceType.UNKNOWN)


def split_fields(line: str) -> list[str]:
    """Split a raw NMEA line into its comma-separated fields.

    Surrounding whitespace (including the \\r\\n line ending) and a trailing
    ``*HH`` checksum suffix are removed first. The checksum is not validated.

    Example:
        Input: "$GPGGA,123519,4807.038,N,...,M,,*47\\r\\n"
        Output: ["$GPGGA", "123519", "4807.038", "N", ..., "M", ""]
    """
    content = line.strip()
    star = content.rfind("*")
    if star != -1:
        content = content[:star]
    return content.split(",")
