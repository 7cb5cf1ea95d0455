import pytest

from bedrockdefs.diagnostics import LogAreaId, LogLevel


def test_log_areas_are_numbered_in_order_from_zero():
    areas = [area for area in LogAreaId if area is not LogAreaId.INVALID]
    assert [LogAreaId(i) for i in range(len(areas))] == areas


def test_log_area_first_and_last_regular_members():
    assert LogAreaId(0) is LogAreaId.ALL
    assert LogAreaId(50) is LogAreaId.SERIALIZATION
    with pytest.raises(ValueError):
        LogAreaId(51)


def test_invalid_log_area_value():
    assert LogAreaId(10000) is LogAreaId.INVALID


def test_invalid_is_above_every_regular_area():
    assert all(area <= LogAreaId(10000) for area in LogAreaId)
    assert max(LogAreaId) is LogAreaId(10000)


@pytest.mark.parametrize("area", list(LogAreaId))
def test_log_area_round_trips_through_value_and_name(area):
    assert LogAreaId(int(area)) is area
    assert LogAreaId[area.name] is area


def test_unknown_log_area_value_raises():
    with pytest.raises(ValueError):
        LogAreaId(9999)


def test_log_levels_are_distinct_single_bits():
    levels = [LogLevel(1 << bit) for bit in range(4)]
    assert levels == list(LogLevel)


def test_log_levels_increase_with_severity():
    assert LogLevel(1) is LogLevel.VERBOSE
    assert LogLevel(8) is LogLevel.ERROR
    assert LogLevel(1) < LogLevel(2) < LogLevel(4) < LogLevel(8)


def test_log_levels_do_not_overlap_as_bits():
    combined = sum(LogLevel)
    assert combined == 15
    for level in LogLevel:
        assert LogLevel(combined & int(level)) is level


def test_combined_level_is_not_a_member():
    with pytest.raises(ValueError):
        LogLevel(LogLevel.INFO | LogLevel.ERROR)