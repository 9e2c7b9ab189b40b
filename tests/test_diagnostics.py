# tests/test_diagnostics.py

import pytest

from calath.diagnostics.pretty_year import year_blocks
from calath.diagnostics.round_trip import roundtrip_test, sample_bounds

FIRST_KA190_DAY = -189 * 77 * 375


def test_sample_bounds_default_to_first_day():
    assert sample_bounds("athas", None, 100) == (0, 100)
    assert sample_bounds("athas-ka190", None, 100) == (FIRST_KA190_DAY, 100)


def test_sample_bounds_clamp_start():
    assert sample_bounds("athas", -50, 100) == (0, 100)
    assert sample_bounds("athas-ka190", -50, 100) == (-50, 100)


def test_sample_bounds_end_before_first_day():
    with pytest.raises(SystemExit):
        sample_bounds("athas", None, -1)
    with pytest.raises(SystemExit):
        sample_bounds("athas-ka190", 10, 5)


def test_round_trip_over_negative_days(capsys):
    # every sampled day lies before the ka190 epoch
    assert roundtrip_test("athas-ka190", N=300, start=None, end=-1, seed=7, max_failures=1) == 0
    assert "FAIL" not in capsys.readouterr().out


def test_year_blocks_layout():
    blocks = year_blocks("athas", 190, 26)
    titles = [t for t, _ in blocks]
    assert len(blocks) == 15
    assert titles[4] == "Cooling Sun"
    assert titles[-1] == "Highest Sun"
    assert sum(len(cells) for _, cells in blocks) == 375
