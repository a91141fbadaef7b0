"""Command-line generator of zone, terrain and overlay map images."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterator

from terraingen.tile import ZoneType
from terraingen.tilemap import TileMap
from terraingen.zone_planner import ZonePlanner, ZoneStrategy


def make_basic_strategy(map_width: int, map_height: int) -> ZoneStrategy:
    """Heights pick high ground and chokes; the outer quarter is flank, the rest arena."""

    def strategy(avg: float, stddev: float, x: int, y: int) -> ZoneType:
        if avg > 0.6:
            return ZoneType.HIGH_GROUND
        if avg < -0.4:
            return ZoneType.CHOKE
        if (x < map_width // 4 or x > 3 * map_width // 4) or (
            y < map_height // 4 or y > 3 * map_height // 4
        ):
            return ZoneType.FLANK
        return ZoneType.ARENA

    return strategy


def make_full_strategy(map_width: int, map_height: int) -> ZoneStrategy:
    """Objectives at the centre, then high ground, flat valleys, flanks, spawns, arena."""

    def strategy(avg: float, stddev: float, x: int, y: int) -> ZoneType:
        if (map_width // 2 - 16 < x < map_width // 2 + 16) and (
            map_height // 2 - 16 < y < map_height // 2 + 16
        ):
            return ZoneType.OBJECTIVE
        if avg > 0.6:
            return ZoneType.HIGH_GROUND
        if avg < -0.4 and stddev < 0.05:
            return ZoneType.CHOKE
        if (x < map_width // 6 or x > 5 * map_width // 6) or (
            y < map_height // 6 or y > 5 * map_height // 6
        ):
            return ZoneType.FLANK
        if (x < map_width // 8 and y < map_height // 8) or (
            x > 7 * map_width // 8 and y > 7 * map_height // 8
        ):
            return ZoneType.SPAWN
        return ZoneType.ARENA

    return strategy


def frequencies(minf: float = 0.011, maxf: float = 0.02, inc: float = 0.005) -> Iterator[float]:
    """Frequencies minf, minf + inc, ... for int((maxf - minf) / inc) steps."""
    if inc <= 0:
        raise ValueError("frequency step must be positive")
    for index in range(max(int((maxf - minf) / inc), 0)):
        yield minf + index * inc


def run_pipeline(
    index: int,
    map_width: int,
    map_height: int,
    zone_size: int,
    strategy: ZoneStrategy,
    frequency: float,
    output_dir,
) -> tuple[Path, Path, Path]:
    """Generate, zone and export one map; returns the zone, terrain and overlay paths."""
    tile_map = TileMap(map_width, map_height)
    tile_map.generate_height_map(frequency, 4, 0.5)
    zones = ZonePlanner(map_width, map_height, zone_size).plan_zones(tile_map, strategy)
    tile_map.apply_zones(zones)

    out = Path(output_dir)
    zone_file = out / f"zone_map_{index}.png"
    terrain_file = out / f"terrain_map_{index}.png"
    overlay_file = out / f"overlay_map_{index}.png"
    tile_map.export_zone_map(zone_file)
    tile_map.export_terrain_map(terrain_file)
    tile_map.export_overlay_map(overlay_file)

    print(f"[Run {index}] Frequency: {frequency:g}")
    print(f"  - Saved zone map     -> {zone_file}")
    print(f"  - Saved terrain map  -> {terrain_file}")
    print(f"  - Saved overlay map  -> {overlay_file}")
    print()
    return zone_file, terrain_file, overlay_file


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate zoned terrain map images.")
    parser.add_argument("--output-dir", default="dump")
    parser.add_argument("--width", type=int, default=256)
    parser.add_argument("--height", type=int, default=256)
    parser.add_argument("--zone-size", type=int, default=16)
    parser.add_argument("--strategy", choices=("basic", "full"), default="basic")
    parser.add_argument("--min-frequency", type=float, default=0.011)
    parser.add_argument("--max-frequency", type=float, default=0.02)
    parser.add_argument("--frequency-step", type=float, default=0.005)
    args = parser.parse_args(argv)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    factory = make_full_strategy if args.strategy == "full" else make_basic_strategy
    strategy = factory(args.width, args.height)
    for index, frequency in enumerate(
        frequencies(args.min_frequency, args.max_frequency, args.frequency_step)
    ):
        run_pipeline(
            index, args.width, args.height, args.zone_size, strategy, frequency, output_dir
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())