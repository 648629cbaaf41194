"""
Tests for engine configuration and view state.
"""

import unittest

from PP_Libs.SessionLib.engine_config import EngineConfig, ViewState


class TestEngineConfig(unittest.TestCase):
    """Test EngineConfig dataclass."""

    def test_config_creation_default(self):
        """Test creating config with defaults."""
        config = EngineConfig()

        self.assertEqual(config.width, 32)
        self.assertEqual(config.height, 32)
        self.assertEqual(config.background, "#ffffff")
        self.assertEqual(config.foreground, "#000000")
        self.assertEqual(config.history_capacity, 50)
        self.assertEqual(config.debounce_ms, 500)

    def test_config_to_dict(self):
        """Test converting config to dictionary."""
        config = EngineConfig(width=16, history_capacity=10)

        data = config.to_dict()

        self.assertEqual(data["width"], 16)
        self.assertEqual(data["history_capacity"], 10)
        self.assertEqual(data["debounce_ms"], 500)

    def test_config_from_dict_ignores_unknown_keys(self):
        """Test creating config from dictionary with extra keys."""
        config = EngineConfig.from_dict({"width": 8, "height": 4, "theme": "dark"})

        self.assertEqual((config.width, config.height), (8, 4))
        self.assertFalse(hasattr(config, "theme"))

    def test_validate_accepts_defaults(self):
        """Test validating the default config."""
        EngineConfig().validate()

    def test_validate_rejects_bad_values(self):
        """Test validation of out-of-range settings."""
        for config in (
            EngineConfig(width=0),
            EngineConfig(height=-1),
            EngineConfig(history_capacity=0),
            EngineConfig(debounce_ms=-5),
            EngineConfig(foreground="#12345"),
        ):
            with self.subTest(config=config):
                with self.assertRaises(ValueError):
                    config.validate()


class TestViewState(unittest.TestCase):
    """Test zoom and grid state."""

    def test_defaults(self):
        """Test default zoom and grid state."""
        view = ViewState()

        self.assertEqual(view.zoom, 8)
        self.assertTrue(view.show_grid)

    def test_zoom_clamps(self):
        """Test zoom stays within its limits."""
        view = ViewState(zoom=15)

        self.assertEqual(view.zoom_in(), 16)
        self.assertEqual(view.zoom_in(), 16)

        view = ViewState(zoom=2)
        self.assertEqual(view.zoom_out(), 1)
        self.assertEqual(view.zoom_out(), 1)

    def test_toggle_grid(self):
        """Test toggling the grid."""
        view = ViewState()

        self.assertFalse(view.toggle_grid())
        self.assertTrue(view.toggle_grid())


if __name__ == "__main__":
    unittest.main()
