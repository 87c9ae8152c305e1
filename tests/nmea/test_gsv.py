"""Tests for GSV sequence reassembly."""

import logging

import pytest

from gnss_analyzer import (
    GNSSData,
    GSVReassembler,
    InvalidDataError,
    ParsingError,
    SatelliteInfo,
    split_fields,
)

GSV_PART_1 = "$GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74"
GSV_PART_2 = "$GPGSV,3,2,11,14,25,170,00,16,57,208,39,18,67,296,40,19,40,246,00*74"
GSV_PART_3 = "$GPGSV,3,3,11,22,42,067,42,24,14,311,43,27,05,244,00,,,,*4D"


def _feed(reassembler: GSVReassembler, sentence: str, data: GNSSData):
    return reassembler.decode(split_fields(sentence), data)


class TestGSVReassembler:
    """Tests for GSVReassembler.decode."""

    def test_first_part_resets_and_sets_expected_parts(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        assert _feed(reassembler, GSV_PART_1, data) is None

        assert reassembler.expected_parts == 3
        assert sorted(reassembler.pending) == [3, 4, 6, 13]
        assert data.satellites == {}

    def test_three_part_sequence_merges_on_last_part(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        assert _feed(reassembler, GSV_PART_1, data) is None
        assert _feed(reassembler, GSV_PART_2, data) is None
        table = _feed(reassembler, GSV_PART_3, data)

        assert table is not None
        assert sorted(table) == [3, 4, 6, 13, 14, 16, 18, 19, 22, 24, 27]
        assert data.satellites == table
        assert table[16] == SatelliteInfo(
            elevation_degrees=57.0, azimuth_degrees=208.0, snr_dbhz=39.0
        )
        assert table[27] == SatelliteInfo(
            elevation_degrees=5.0, azimuth_degrees=244.0, snr_dbhz=0.0
        )

    def test_completion_clears_accumulator(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        for sentence in (GSV_PART_1, GSV_PART_2, GSV_PART_3):
            _feed(reassembler, sentence, data)

        assert reassembler.pending == {}
        assert reassembler.expected_parts == 0

    def test_average_snr_computed_on_completion(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        for sentence in (GSV_PART_1, GSV_PART_2, GSV_PART_3):
            _feed(reassembler, sentence, data)

        # 39 + 40 + 42 + 43 over eleven satellites
        assert data.average_snr == pytest.approx(164.0 / 11)

    def test_average_snr_ignores_missing_values(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        _feed(reassembler, "$GPGSV,1,1,02,05,10,100,,08,45,180,38", data)

        assert data.average_snr == pytest.approx(38.0)

    def test_later_part_overwrites_same_prn(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        _feed(reassembler, "$GPGSV,2,1,05,07,10,100,20,09,20,200,25,,,,,,,,", data)
        table = _feed(reassembler, "$GPGSV,2,2,05,07,11,101,33,12,30,300,35", data)

        assert table is not None
        assert sorted(table) == [7, 9, 12]
        assert table[7] == SatelliteInfo(
            elevation_degrees=11.0, azimuth_degrees=101.0, snr_dbhz=33.0
        )

    def test_every_satellite_group_is_consumed(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        table = _feed(
            reassembler,
            "$GPGSV,1,1,04,01,10,100,30,02,20,200,31,03,30,300,32,04,40,340,33",
            data,
        )

        assert table is not None
        assert {prn: info.snr_dbhz for prn, info in table.items()} == {
            1: 30.0,
            2: 31.0,
            3: 32.0,
            4: 33.0,
        }

    def test_invalid_prn_groups_are_dropped(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        table = _feed(
            reassembler,
            "$GPGSV,1,1,04,XX,10,100,30,-5,20,200,35,07,30,300,40,0,40,40,40",
            data,
        )

        assert table == {
            7: SatelliteInfo(elevation_degrees=30.0, azimuth_degrees=300.0, snr_dbhz=40.0)
        }

    def test_unparseable_values_stored_as_missing(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        table = _feed(reassembler, "$GPGSV,1,1,02,05,,abc,,08,45,180,38", data)

        assert table is not None
        assert table[5] == SatelliteInfo(
            elevation_degrees=None, azimuth_degrees=None, snr_dbhz=None
        )
        assert table[8].snr_dbhz == pytest.approx(38.0)

    def test_trailing_partial_group_is_ignored(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        table = _feed(reassembler, "$GPGSV,1,1,02,05,10,100,30,08,45", data)

        assert table is not None
        assert sorted(table) == [5]

    def test_new_first_part_discards_incomplete_sequence(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        _feed(reassembler, GSV_PART_1, data)
        _feed(reassembler, "$GPGSV,2,1,05,07,10,100,20,09,20,200,25", data)

        assert reassembler.expected_parts == 2
        assert sorted(reassembler.pending) == [7, 9]

    def test_completed_table_replaces_previous_contents(self):
        reassembler = GSVReassembler()
        data = GNSSData()
        satellites = data.satellites

        _feed(reassembler, "$GPGSV,1,1,01,07,10,100,20", data)
        _feed(reassembler, "$GPGSV,1,1,01,09,20,200,25", data)

        assert data.satellites is satellites
        assert sorted(data.satellites) == [9]

    def test_parts_without_first_part_never_complete(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        assert _feed(reassembler, GSV_PART_2, data) is None
        assert _feed(reassembler, GSV_PART_3, data) is None
        assert data.satellites == {}

    def test_header_only_sentence(self):
        reassembler = GSVReassembler()
        data = GNSSData()

        assert _feed(reassembler, "$GPGSV,1,1,00", data) == {}
        assert data.average_snr == 0.0

    def test_too_few_fields(self):
        with pytest.raises(ParsingError, match="too short"):
            GSVReassembler().decode(["$GPGSV", "3", "1"], GNSSData())

    @pytest.mark.parametrize(
        "sentence",
        ["$GPGSV,X,1,11", "$GPGSV,3,,11", "$GPGSV,3,0,11", "$GPGSV,-1,1,11"],
    )
    def test_invalid_message_numbering(self, sentence):
        with pytest.raises(InvalidDataError, match="Invalid GSV"):
            _feed(GSVReassembler(), sentence, GNSSData())

    def test_reset(self):
        reassembler = GSVReassembler()
        _feed(reassembler, GSV_PART_1, GNSSData())

        reassembler.reset()

        assert reassembler.expected_parts == 0
        assert reassembler.pending == {}

    def test_instances_do_not_share_state(self):
        first = GSVReassembler()
        second = GSVReassembler()

        _feed(first, GSV_PART_1, GNSSData())

        assert second.expected_parts == 0
        assert second.pending == {}

    def test_failure_is_logged_and_reraised(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gnss_analyzer.nmea.gsv"):
            with pytest.raises(ParsingError):
                GSVReassembler().decode(["$GPGSV"], GNSSData())

        assert "GSV decode failed" in caplog.text
