"""GNSSReader: turns a stream of NMEA lines into per-fix snapshots.

The reader does no I/O of its own. It consumes any iterable of text lines
(an open file, ``sys.stdin``, a list) and emits one ``GNSSData`` per GGA
sentence.

Reading strategy:
    GSV sequences are reassembled as they arrive; each completed table is
    remembered. On each successfully decoded GGA sentence the most recently
    completed satellite table is merged into a fresh snapshot, the same way
    a position fix is paired with the latest sky view.
"""

import datetime as dt
import logging
from collections.abc import Callable, Iterable, Iterator
from types import TracebackType

from gnss_analyzer.nmea.errors import NMEAError
from gnss_analyzer.nmea.sentence import classify_sentence
from gnss_analyzer.nmea.types import GNSSData, SatelliteInfo, SentenceType
from gnss_analyzer.nmea_parser import NMEAParser

__all__ = ["GNSSReader"]

logger = logging.getLogger(__name__)


class GNSSReader:
    """Context manager for decoding GNSS snapshots from NMEA text lines.

    Two consumption patterns are supported:

    Continuous iteration::

        with GNSSReader(open("capture.nmea")) as gnss:
            for data in gnss:
                process(data)

    Single read::

        with GNSSReader(lines) as gnss:
            data = gnss.read()

    Each emitted ``GNSSData`` holds the fix from one GGA sentence and the
    satellite table (with its average SNR) of the last GSV sequence completed
    before it. A line that fails to decode is logged and its snapshot is
    discarded; reading continues with the next line.

    Args:
        stream: Iterable of raw NMEA lines. Closed on exit if it has a
            ``close()`` method.
        today: Date provider for GGA timestamps (default: current UTC date).
    """

    def __init__(
        self,
        stream: Iterable[str],
        *,
        today: Callable[[], dt.date] | None = None,
    ) -> None:
        self._stream = stream
        self._lines: Iterator[str] = iter(stream)
        self._parser = NMEAParser(today=today)
        self._sky = GNSSData()
        self.sentences_decoded = 0
        self.decode_errors = 0

    def __enter__(self) -> "GNSSReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the underlying stream if it supports closing."""
        close = getattr(self._stream, "close", None)
        if close is not None:
            close()

    @property
    def satellites(self) -> dict[int, SatelliteInfo]:
        """Copy of the most recently completed GSV satellite table."""
        return dict(self._sky.satellites)

    def _merge_sky(self, data: GNSSData) -> None:
        data.satellites.update(self._sky.satellites)
        data.average_snr = self._sky.average_snr

    def _decode_line(self, line: str) -> GNSSData | None:
        """Decode one line; returns a snapshot only for a good GGA sentence."""
        data = GNSSData()
        try:
            # GSV completes into the sky snapshot, GGA into the fresh one
            if classify_sentence(line) is SentenceType.GSV:
                target = self._sky
            else:
                target = data
            sentence_type = self._parser.parse_line(line, target)
        except NMEAError as exc:
            self.decode_errors += 1
            logger.warning("Discarding NMEA line %r: %s", line.strip(), exc)
            return None

        if sentence_type is SentenceType.UNKNOWN:
            logger.debug("Skipping unsupported line %r", line.strip())
            return None

        self.sentences_decoded += 1
        if sentence_type is not SentenceType.GGA:
            return None

        self._merge_sky(data)
        return data

    def read(self) -> GNSSData:
        """Consume lines until the next GGA fix and return its snapshot.

        Raises:
            EOFError: If the stream ends before another fix is decoded.
        """
        for line in self._lines:
            data = self._decode_line(line)
            if data is not None:
                return data
        raise EOFError("NMEA stream ended.")

    def __iter__(self) -> Iterator[GNSSData]:
        """Yield GNSS snapshots, one per decoded GGA sentence, until EOF."""
        while True:
            try:
                yield self.read()
            except EOFError:
                return
