"""Tests for the command-line entry point."""

import json

import pytest
from PIL import Image

from geometry.shapes import ShapeType
from main import DEMO_TEXTURE, checker_texture, create_demo_scene, main, parse_args
from scene.scenedata import LightType


def test_demo_scene_uses_every_shape_and_light_type():
    render_data, textures = create_demo_scene()
    assert {s.primitive.type for s in render_data.shapes} == set(ShapeType)
    assert {light.type for light in render_data.lights} == set(LightType)
    assert DEMO_TEXTURE in textures


def test_checker_texture_alternates():
    texture = checker_texture(size=16, squares=2)
    assert texture.data.shape == (16, 16, 4)
    assert tuple(texture.data[0, 0]) != tuple(texture.data[0, 8])
    assert tuple(texture.data[0, 0]) == tuple(texture.data[8, 8])


def test_render_demo(tmp_path):
    out = tmp_path / "demo.png"
    assert main(["--demo", "--width", "8", "--height", "6", "-o", str(out)]) == 0
    with Image.open(out) as image:
        assert image.size == (8, 6)
        assert image.mode == "RGBA"


def test_render_demo_to_jpeg_drops_alpha(tmp_path):
    out = tmp_path / "demo.jpg"
    assert main(["--demo", "--width", "8", "--height", "6", "-o", str(out)]) == 0
    with Image.open(out) as image:
        assert image.size == (8, 6)
        assert image.mode == "RGB"


def test_unknown_output_format(tmp_path):
    out = tmp_path / "demo.xyz"
    assert main(["--demo", "--width", "8", "--height", "6", "-o", str(out)]) == 1
    assert not out.exists()


def test_render_scene_file(tmp_path):
    scene = {
        "camera": {"position": [0, 0, 5], "look": [0, 0, -1], "up": [0, 1, 0],
                   "heightAngle": 30},
        "lights": [{"type": "point", "color": [1, 1, 1], "position": [0, 0, 5]}],
        "root": {"primitives": [{"type": "sphere", "material": {"diffuse": [1, 0, 0]}}]},
    }
    scene_path = tmp_path / "scene.json"
    scene_path.write_text(json.dumps(scene))
    out = tmp_path / "out.png"
    assert main([str(scene_path), "--width", "5", "--height", "5", "-o", str(out),
                 "--no-shadows", "--no-reflections"]) == 0
    with Image.open(out) as image:
        assert image.getpixel((2, 2)) == (255, 0, 0, 255)


def test_missing_scene_file(tmp_path):
    assert main([str(tmp_path / "missing.json"), "-o", str(tmp_path / "out.png")]) == 1


def test_malformed_scene_file(tmp_path):
    scene_path = tmp_path / "scene.json"
    scene_path.write_text(json.dumps({"root": {}}))
    assert main([str(scene_path), "-o", str(tmp_path / "out.png")]) == 1


@pytest.mark.parametrize("argv", [[], ["--demo", "--width", "0"]])
def test_invalid_arguments(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)
