"""Tests for configuration persistence and clamping."""

import json

from config_manager import ConfigManager
from models import ALT_OUTLINE_SHARE, AnimatorConfig


def test_missing_file_gives_defaults(tmp_path):
    config = ConfigManager(tmp_path / "absent.json").load()
    assert config == AnimatorConfig()


def test_round_trip(tmp_path):
    manager = ConfigManager(tmp_path / "config.json")
    config = AnimatorConfig(
        speed=250,
        auto_start=True,
        outline_share=ALT_OUTLINE_SHARE,
        gallery_dir="/tmp/gallery",
    )

    success, error = manager.save(config)
    loaded = manager.load()

    assert success and error is None
    assert loaded.speed == 250
    assert loaded.auto_start is True
    assert loaded.outline_share == 50
    assert loaded.gallery_dir == "/tmp/gallery"


def test_colors_are_not_persisted(tmp_path):
    path = tmp_path / "config.json"
    ConfigManager(path).save(AnimatorConfig())
    data = json.loads(path.read_text())
    assert "background_color" not in data
    assert "outline_color" not in data
    assert data["max_size"] == 1000


def test_out_of_range_values_are_clamped(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "speed": 9999,
                "outline_share": 140,
                "edge_threshold": -3,
                "outline_stride": 0,
                "resample": "sparkly",
                "unknown_key": 1,
            }
        )
    )

    config = ConfigManager(path).load()

    assert config.speed == 500
    assert config.outline_share == 100
    assert config.edge_threshold == 0.0
    assert config.outline_stride == 1
    assert config.resample == "lanczos"


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert ConfigManager(path).load() == AnimatorConfig()


def test_wrong_types_give_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"speed": "fast"}))
    assert ConfigManager(path).load() == AnimatorConfig()

    path.write_text(json.dumps([1, 2, 3]))
    assert ConfigManager(path).load() == AnimatorConfig()


def test_save_failure_reports_error(tmp_path):
    success, error = ConfigManager(tmp_path / "missing" / "config.json").save(AnimatorConfig())
    assert not success
    assert error


def test_clamp_speed_uses_configured_range():
    config = AnimatorConfig(min_speed=20, max_speed=40)
    assert config.clamp_speed(5) == 20
    assert config.clamp_speed(100) == 40
    assert config.clamp_speed(30) == 30
