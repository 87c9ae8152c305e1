"""Tests for the command line entry point."""

import json

from gnss_analyzer.__main__ import main

CAPTURE = [
    "$GPGSV,1,1,02,07,10,100,30,09,20,200,40*70",
    "$GPGGA,123519,4807.038,N,11131.000,E,1,08,0.9,545.4,M,,*47",
    "$GPGGA,094500,,,,,0,00,99.9,,,,,,*48",
    "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A",
    "$GPGGA,123520,5123.456,N,00012.345,E,2,10,1.2,120.0,M,,*5C",
]


def test_main_prints_one_json_line_per_fix(tmp_path, capsys):
    capture = tmp_path / "capture.nmea"
    capture.write_text("\r\n".join(CAPTURE) + "\r\n", encoding="ascii")

    assert main([str(capture)]) == 0

    lines = capsys.readouterr().out.splitlines()
    messages = [json.loads(line) for line in lines]
    assert [m["fix_type"] for m in messages] == ["GPS Fix", "DGPS Fix"]
    assert [s["prn"] for s in messages[0]["satellites"]] == [7, 9]
    assert messages[0]["average_snr"] == 35.0


def test_main_empty_capture(tmp_path, capsys):
    capture = tmp_path / "empty.nmea"
    capture.write_text("", encoding="ascii")

    assert main([str(capture), "--log-level", "DEBUG"]) == 0
    assert capsys.readouterr().out == ""
