import pytest
from PIL import Image

from terraingen.cli import (
    frequencies,
    main,
    make_basic_strategy,
    make_full_strategy,
    run_pipeline,
)
from terraingen.tile import ZoneType


def test_basic_strategy_rules():
    strategy = make_basic_strategy(256, 256)
    assert strategy(0.7, 0.0, 128, 128) is ZoneType.HIGH_GROUND
    assert strategy(-0.5, 0.0, 128, 128) is ZoneType.CHOKE
    assert strategy(0.0, 0.0, 0, 128) is ZoneType.FLANK
    assert strategy(0.0, 0.0, 128, 250) is ZoneType.FLANK
    assert strategy(0.0, 0.0, 128, 128) is ZoneType.ARENA


def test_full_strategy_rules():
    strategy = make_full_strategy(256, 256)
    assert strategy(0.9, 0.0, 128, 128) is ZoneType.OBJECTIVE
    assert strategy(0.7, 0.0, 100, 60) is ZoneType.HIGH_GROUND
    assert strategy(-0.5, 0.01, 100, 60) is ZoneType.CHOKE
    assert strategy(-0.5, 0.1, 100, 60) is ZoneType.ARENA
    assert strategy(0.0, 0.0, 0, 0) is ZoneType.FLANK


def test_default_frequencies():
    values = list(frequencies())
    assert len(values) == 1
    assert values[0] == pytest.approx(0.011)


def test_frequency_steps():
    assert list(frequencies(0.0, 1.0, 0.25)) == [0.0, 0.25, 0.5, 0.75]


def test_frequency_step_must_be_positive():
    with pytest.raises(ValueError):
        list(frequencies(0.0, 1.0, 0.0))


def test_run_pipeline_writes_images(tmp_path, capsys):
    paths = run_pipeline(3, 32, 24, 8, make_basic_strategy(32, 24), 0.05, tmp_path)
    names = [p.name for p in paths]
    assert names == ["zone_map_3.png", "terrain_map_3.png", "overlay_map_3.png"]
    for path in paths:
        with Image.open(path) as image:
            assert image.size == (32, 24)
    assert "[Run 3] Frequency: 0.05" in capsys.readouterr().out


def test_main_generates_all_runs(tmp_path):
    out = tmp_path / "maps"
    code = main([
        "--output-dir", str(out), "--width", "32", "--height", "32", "--zone-size", "8",
        "--strategy", "full", "--min-frequency", "0.01", "--max-frequency", "0.04",
        "--frequency-step", "0.01",
    ])
    assert code == 0
    expected_runs = len(list(frequencies(0.01, 0.04, 0.01)))
    assert len(list(out.glob("zone_map_*.png"))) == expected_runs
    assert len(list(out.glob("*.png"))) == 3 * expected_runs