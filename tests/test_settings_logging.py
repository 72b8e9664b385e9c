"""Tests for render presets and logging setup."""

import logging

import pytest

from core.logging_config import ROOT_LOGGER_NAMES, setup_logging
from core.vector import Color
from renderer.settings import MAX_BOUNCES, QUALITY_LEVELS, RenderSettings


@pytest.fixture
def restore_loggers():
    yield
    for name in ROOT_LOGGER_NAMES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


class TestRenderSettings:
    def test_defaults(self):
        settings = RenderSettings()
        assert settings.samples_per_pixel == 10
        assert settings.max_depth == MAX_BOUNCES == 50
        assert settings.background is None

    @pytest.mark.parametrize("name", sorted(QUALITY_LEVELS))
    def test_presets(self, name):
        settings = RenderSettings.from_quality(name)
        assert settings.samples_per_pixel == QUALITY_LEVELS[name]["samples"]
        assert settings.max_depth == QUALITY_LEVELS[name]["bounces"]

    def test_preset_with_background(self):
        settings = RenderSettings.from_quality("interactive", background=Color(0, 0, 0))
        assert settings.background == Color(0, 0, 0)
        assert settings.max_depth == 4

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="ultra"):
            RenderSettings.from_quality("ultra")

    @pytest.mark.parametrize("kwargs", [
        {"samples_per_pixel": 0},
        {"max_depth": -1},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            RenderSettings(**kwargs)


class TestLoggingSetup:
    def test_sets_levels(self, restore_loggers):
        logger = setup_logging("debug")
        assert logger.name == "renderer"
        for name in ROOT_LOGGER_NAMES:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate(self, restore_loggers):
        setup_logging("INFO")
        setup_logging("INFO")
        for name in ROOT_LOGGER_NAMES:
            assert len(logging.getLogger(name).handlers) == 1

    def test_unknown_level_falls_back_to_warning(self, restore_loggers):
        setup_logging("chatty")
        assert logging.getLogger("geometry").level == logging.WARNING

    def test_log_file(self, tmp_path, restore_loggers):
        log_file = tmp_path / "logs" / "render.log"
        setup_logging("INFO", log_file=log_file)
        logging.getLogger("renderer.raytracer").info("pass complete")
        for handler in logging.getLogger("renderer").handlers:
            handler.flush()
        assert "pass complete" in log_file.read_text()
        assert len(logging.getLogger("renderer").handlers) == 2
