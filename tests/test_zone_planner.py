import pytest

from terraingen.tile import ZoneType
from terraingen.tilemap import TileMap
from terraingen.zone_planner import ZonePlanner


def _recorder(calls):
    def strategy(avg, stddev, x, y):
        calls.append((avg, stddev, x, y))
        return ZoneType.ARENA

    return strategy


def test_zero_zone_size_raises():
    with pytest.raises(ValueError):
        ZonePlanner(8, 8, 0)


def test_plan_zones_positions_and_order():
    tm = TileMap(8, 8)
    calls = []
    zones = ZonePlanner(8, 8, 4).plan_zones(tm, _recorder(calls))
    assert [(z.x_start, z.y_start) for z in zones] == [(0, 0), (4, 0), (0, 4), (4, 4)]
    assert all(z.size == 4 and z.type is ZoneType.ARENA for z in zones)
    assert [(c[2], c[3]) for c in calls] == [(0, 0), (4, 0), (0, 4), (4, 4)]


def test_plan_zones_constant_block_statistics():
    tm = TileMap(4, 4)
    for row in tm.tiles:
        for tile in row:
            tile.height = 0.5
    calls = []
    ZonePlanner(4, 4, 4).plan_zones(tm, _recorder(calls))
    avg, stddev, _, _ = calls[0]
    assert avg == pytest.approx(0.5)
    assert stddev == pytest.approx(0.0)


def test_plan_zones_alternating_block_stddev():
    tm = TileMap(2, 2)
    tm.get(0, 0).height = 1.0
    tm.get(1, 1).height = 1.0
    calls = []
    ZonePlanner(2, 2, 2).plan_zones(tm, _recorder(calls))
    avg, stddev, _, _ = calls[0]
    assert avg == pytest.approx(0.5)
    assert stddev == pytest.approx(0.5)


def test_partial_edge_block_uses_only_in_bounds_tiles():
    tm = TileMap(5, 5)
    for y in range(5):
        tm.get(4, y).height = 1.0
    calls = []
    zones = ZonePlanner(5, 5, 4).plan_zones(tm, _recorder(calls))
    assert len(zones) == 4
    by_pos = {(c[2], c[3]): c for c in calls}
    assert by_pos[(4, 0)][0] == pytest.approx(1.0)
    assert by_pos[(0, 0)][0] == pytest.approx(0.0)


def test_strategy_result_becomes_zone_type():
    tm = TileMap(4, 4)
    zones = ZonePlanner(4, 4, 2).plan_zones(
        tm, lambda avg, sd, x, y: ZoneType.FLANK if x == 0 else ZoneType.CHOKE
    )
    assert [z.type for z in zones] == [ZoneType.FLANK, ZoneType.CHOKE] * 2


def test_map_smaller_than_plan_raises():
    with pytest.raises(ValueError):
        ZonePlanner(8, 8, 4).plan_zones(TileMap(4, 4), _recorder([]))


def test_rotating_zones_cycle_types():
    zones = ZonePlanner(16, 16, 2).plan_rotating_zones()
    assert len(zones) == 64
    first_row = [z for z in zones if z.y_start == 0]
    assert [z.type for z in first_row][:7] == [
        ZoneType.SPAWN, ZoneType.ARENA, ZoneType.CHOKE, ZoneType.FLANK,
        ZoneType.HIGH_GROUND, ZoneType.OBJECTIVE, ZoneType.SPAWN,
    ]
    assert all(z.type is not ZoneType.UNASSIGNED for z in zones)


def test_rotating_zones_drop_partial_blocks():
    zones = ZonePlanner(5, 5, 2).plan_rotating_zones()
    assert len(zones) == 4
    assert max(z.x_start + z.size for z in zones) <= 5