"""Unit tests for render configuration.

Tests cover:
- Validation of image size, samples, depth, seed and workers
- Quality presets and overrides
"""

import pytest

from raytrace.config import QUALITY_PRESETS, ExecutorKind, RenderConfig, RowOrder


class TestRenderConfig:
    """Tests for RenderConfig validation."""

    def test_defaults(self):
        config = RenderConfig(200, 100)
        assert config.samples_per_pixel == 100
        assert config.max_depth == 50
        assert config.seed is None
        assert config.row_order is RowOrder.TOP_DOWN
        assert config.executor is ExecutorKind.THREAD
        assert config.aspect_ratio == 2.0

    @pytest.mark.parametrize("kwargs", [
        {"width": 0},
        {"height": -1},
        {"samples_per_pixel": 0},
        {"max_depth": -1},
        {"width": 10.5},
        {"height": True},
        {"seed": -3},
        {"workers": 0},
        {"row_order": "top-down"},
        {"executor": "thread"},
    ])
    def test_rejects_invalid_values(self, kwargs):
        params = {"width": 20, "height": 10, "samples_per_pixel": 1, "max_depth": 1}
        params.update(kwargs)
        with pytest.raises(ValueError):
            RenderConfig(**params)

    def test_zero_depth_is_allowed(self):
        assert RenderConfig(20, 10, max_depth=0).max_depth == 0

    def test_is_frozen(self):
        config = RenderConfig(20, 10)
        with pytest.raises(AttributeError):
            config.width = 40


class TestPresets:
    """Tests for RenderConfig.from_preset()."""

    @pytest.mark.parametrize("name", sorted(QUALITY_PRESETS))
    def test_known_presets(self, name):
        config = RenderConfig.from_preset(name, 64, 32)
        assert config.samples_per_pixel == QUALITY_PRESETS[name]["samples_per_pixel"]
        assert config.max_depth == QUALITY_PRESETS[name]["max_depth"]

    def test_overrides(self):
        config = RenderConfig.from_preset("final", 64, 32, samples_per_pixel=7, seed=5)
        assert config.samples_per_pixel == 7
        assert config.max_depth == QUALITY_PRESETS["final"]["max_depth"]
        assert config.seed == 5

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            RenderConfig.from_preset("ultra", 64, 32)
