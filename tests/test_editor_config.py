"""Tests for EditorConfig defaults and JSON loading."""
import json

import pytest

from constants import DEFAULT_PHYS_UNIT, DELETE_HOLD_MS, SEGMENT_HIT_TOLERANCE
from models.editor_config import EditorConfig, load_editor_config


class TestEditorConfig:
    def test_defaults(self):
        config = EditorConfig()
        assert config.phys_unit == DEFAULT_PHYS_UNIT
        assert config.segment_tolerance == SEGMENT_HIT_TOLERANCE
        assert config.delete_hold_ms == DELETE_HOLD_MS
        assert config.pick_radius == 0.5 * DEFAULT_PHYS_UNIT

    def test_from_dict_converts_types(self):
        config = EditorConfig.from_dict({'delete_hold_ms': 250.7, 'phys_unit': 30})
        assert config.delete_hold_ms == 250
        assert isinstance(config.delete_hold_ms, int)
        assert config.phys_unit == 30.0
        assert config.pick_radius == 15.0

    def test_unknown_keys_ignored(self, caplog):
        with caplog.at_level('WARNING', logger='EditorConfig'):
            config = EditorConfig.from_dict({'bogus': 1, 'curve_amount': 0.5})
        assert config.curve_amount == 0.5
        assert 'bogus' in caplog.text


class TestLoadEditorConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_editor_config(str(tmp_path / 'nope.json')) == EditorConfig()

    def test_partial_override(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'segment_tolerance': 8, 'viewport_margin': 10}), encoding='utf-8')
        config = load_editor_config(str(path))
        assert config.segment_tolerance == 8.0
        assert config.viewport_margin == 10.0
        assert config.phys_unit == DEFAULT_PHYS_UNIT

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{not json', encoding='utf-8')
        with pytest.raises(ValueError):
            load_editor_config(str(path))

    def test_non_object_root_raises(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('[1, 2]', encoding='utf-8')
        with pytest.raises(ValueError):
            load_editor_config(str(path))

    def test_config_reaches_editor(self, tmp_path, qapp):
        from services.tile_editor import TileEditor
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'phys_unit': 40, 'curve_amount': 0.75}), encoding='utf-8')

        editor = TileEditor(load_editor_config(str(path)))
        editor.set_shape_family('parallelogram')

        assert editor.config.pick_radius == 20.0
        assert editor.get_curve_amount() == 0.75


class TestLoggerRaise:
    def test_debug_mode_reraises(self, monkeypatch):
        from utils import logger
        monkeypatch.setattr(logger, 'DEBUG_MODE', True)
        with pytest.raises(KeyError):
            logger.loggerRaise(KeyError('x'), "Lookup failed")

    def test_release_mode_logs_then_reraises(self, monkeypatch, caplog):
        from utils import logger
        monkeypatch.setattr(logger, 'DEBUG_MODE', False)
        monkeypatch.setattr(logger, '_main_window', None)
        with caplog.at_level('ERROR', logger='ErrorHandler'):
            with pytest.raises(RuntimeError):
                logger.loggerRaise(RuntimeError('boom'), "Could not load", title="Config")
        assert 'Could not load' in caplog.text
