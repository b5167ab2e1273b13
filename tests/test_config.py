"""Tests for configuration loading and validation."""
import json

import pytest
from pydantic import ValidationError

from shiftboard.models.config import BoardConfig, load_config
from shiftboard.models.validated import ValidatedBoardConfig


class TestBoardConfig:
    def test_defaults(self):
        cfg = BoardConfig()
        assert cfg.min_staff_per_day == 3
        assert cfg.forward_month_limit == 2
        assert cfg.storage == "json"
        assert cfg.data_dir == "data"

    def test_dict_roundtrip(self):
        cfg = BoardConfig(min_staff_per_day=5, storage="sqlite")
        assert BoardConfig.from_dict(cfg.to_dict()) == cfg

    def test_from_dict_ignores_unknown(self):
        cfg = BoardConfig.from_dict({"min_staff_per_day": 4, "colour": "blue"})
        assert cfg.min_staff_per_day == 4
        assert not hasattr(cfg, "colour")


class TestValidatedBoardConfig:
    def test_valid(self):
        cfg = ValidatedBoardConfig(min_staff_per_day=2, forward_month_limit=6).to_dataclass()
        assert isinstance(cfg, BoardConfig)
        assert cfg.forward_month_limit == 6

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            ValidatedBoardConfig(min_staff_per_day=-1)

    def test_limit_range(self):
        with pytest.raises(ValidationError):
            ValidatedBoardConfig(forward_month_limit=25)

    def test_unknown_storage_rejected(self):
        with pytest.raises(ValidationError):
            ValidatedBoardConfig(storage="redis")

    def test_log_level_normalized(self):
        assert ValidatedBoardConfig(log_level="trace").log_level == "TRACE"

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            ValidatedBoardConfig(log_level="LOUD")

    def test_from_dataclass(self):
        cfg = BoardConfig(data_dir="elsewhere")
        assert ValidatedBoardConfig.from_dataclass(cfg).data_dir == "elsewhere"


class TestLoadConfig:
    def test_no_file(self):
        assert load_config() == BoardConfig()

    def test_file(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"min_staff_per_day": 4, "storage": "memory"}), encoding="utf-8")
        cfg = load_config(path)
        assert cfg.min_staff_per_day == 4
        assert cfg.storage == "memory"

    def test_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"min_staff_per_day": 4}), encoding="utf-8")
        cfg = load_config(path, min_staff_per_day=1, data_dir=None)
        assert cfg.min_staff_per_day == 1
        assert cfg.data_dir == "data"

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"forward_month_limit": -3}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_non_object_file(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)
