"""Tests for configuration, the demo scene and the command-line entry point."""

import numpy as np
import pytest

from phongtrace.app import Window, config_from_args, main, parse_args, render_to_file
from phongtrace.config import RenderConfig, parse_color
from phongtrace.core.color import Color
from phongtrace.core.vector import Vector3
from phongtrace.scenes import create_default_scene


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self):
        config = RenderConfig()
        assert (config.width, config.height) == (600, 600)
        assert config.fov == 60.0
        assert config.ray_length == 10.0
        assert config.background_color == Color.green()

    def test_round_trip_dict(self):
        config = RenderConfig(width=32, height=16, background="#102030")
        assert RenderConfig.from_dict(config.to_dict()) == config

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            RenderConfig.from_dict({"width": 10, "samples": 4})

    @pytest.mark.parametrize("kwargs", [
        {"width": 0}, {"height": -1}, {"fov": 180}, {"ray_length": 0}, {"background": "mauve"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RenderConfig(**kwargs)


class TestParseColor:
    """Tests for color names and hex strings."""

    def test_named(self):
        assert parse_color(" Cyan ") == Color.cyan()

    def test_rgb_hex_is_opaque(self):
        assert parse_color("#102030") == Color(0x10, 0x20, 0x30, 255)

    def test_argb_hex(self):
        assert parse_color("#80102030") == Color(0x10, 0x20, 0x30, 0x80)


class TestDefaultScene:
    """Tests for the demo scene."""

    def test_contents(self):
        scene, camera = create_default_scene()
        assert len(scene.surfaces) == 3
        assert len(scene.lights) == 3
        assert all(light.color == Color.cyan() for light in scene.lights)
        assert camera.position == Vector3(0, 0, 0)
        assert (camera.width, camera.height) == (600, 600)


class TestWindow:
    """Tests for the window callbacks that do not need a display."""

    def test_resize_reallocates_and_notifies(self):
        window = Window("test", 4, 4)
        calls = []
        window.on_resize = lambda w, width, height: calls.append((width, height))
        window._resize(8, 2)
        assert window.buffer.shape == (16,)
        assert window.buffer.dtype == np.uint32
        assert calls == [(8, 2)]
        assert (window.get_width(), window.get_height()) == (8, 2)


class TestCommandLine:
    """Tests for the headless command-line path."""

    def test_parse_args_defaults(self):
        args = parse_args([])
        assert args.output is None
        config = config_from_args(args)
        assert config == RenderConfig()

    def test_render_to_file(self, tmp_path):
        path = render_to_file(RenderConfig(width=8, height=8), str(tmp_path / "out.png"))
        assert path.exists()

    def test_main_headless(self, tmp_path):
        output = tmp_path / "main.png"
        assert main(["--width", "8", "--height", "6", "--output", str(output)]) == 0
        assert output.exists()

    def test_main_invalid_config(self, tmp_path):
        assert main(["--fov", "0", "--output", str(tmp_path / "bad.png")]) == 1
