import json

import pytest

from buffonpi.exceptions import InvalidConfiguration
from buffonpi.main import build_parser, simulate


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert not args.batch
    assert args.shards is None
    assert args.drops is None


def test_batch_run():
    estimate = simulate(["--batch", "--drops", "20000", "--seed", "3"])
    assert 2.5 < estimate < 3.8


def test_sharded_run():
    estimate = simulate(["--shards", "2", "--drops", "20000", "--seed", "3"])
    assert 2.5 < estimate < 3.8


def test_paced_run_with_settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"toothpick_count": 5, "throw_interval": 0, "seed": 1}), encoding="utf-8")
    estimate = simulate(["--settings", str(path)])
    assert estimate >= 0.0


@pytest.mark.parametrize("shards", ["0", "-1"])
def test_bad_shard_count(shards):
    with pytest.raises(InvalidConfiguration):
        simulate(["--shards", shards, "--drops", "100"])
