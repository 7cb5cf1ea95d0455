import pytest

from bedrockdefs.scripting import PluginExecutionGroup


def test_groups_are_numbered_in_order_from_zero():
    groups = list(PluginExecutionGroup)
    assert [PluginExecutionGroup(i) for i in range(len(groups))] == groups


def test_pack_load_comes_first():
    assert PluginExecutionGroup(0) is PluginExecutionGroup.PACK_LOAD
    assert PluginExecutionGroup.PACK_LOAD < PluginExecutionGroup.SERVER_START


def test_values_fit_in_one_byte():
    for group in PluginExecutionGroup:
        assert PluginExecutionGroup(int(group) & 0xFF) is group


@pytest.mark.parametrize("group", list(PluginExecutionGroup))
def test_round_trip_through_value_and_name(group):
    assert PluginExecutionGroup(int(group)) is group
    assert PluginExecutionGroup[group.name] is group


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        PluginExecutionGroup(len(PluginExecutionGroup))