"""Command line entry point tests (headless paths only)."""

import pytest
import yaml
from PIL import Image

import bezier_viewer
from bezierview.config import EXIT_BAD_CONFIG, EXIT_EXPORT_FAILED, EXIT_OK


class TestMain:

    def test_export_default_scene(self, tmp_path):
        out = tmp_path / 'out.png'
        assert bezier_viewer.main(['--quiet', '--export', str(out)]) == EXIT_OK
        with Image.open(out) as img:
            assert img.size == (400, 400)

    def test_size_override(self, tmp_path):
        out = tmp_path / 'out.png'
        assert bezier_viewer.main(['--quiet', '--size', '200x100', '--export', str(out)]) == EXIT_OK
        with Image.open(out) as img:
            assert img.size == (200, 100)

    def test_config_file(self, tmp_path):
        config = tmp_path / 'scene.yaml'
        config.write_text(yaml.safe_dump({'canvas_size': [64, 32], 'steps': 4}))
        out = tmp_path / 'out.png'
        code = bezier_viewer.main(['--quiet', '--config', str(config), '--export', str(out)])
        assert code == EXIT_OK
        with Image.open(out) as img:
            assert img.size == (64, 32)

    def test_bad_config(self, tmp_path, capsys):
        config = tmp_path / 'scene.yaml'
        config.write_text('steps: 0\n')
        assert bezier_viewer.main(['--quiet', '--config', str(config)]) == EXIT_BAD_CONFIG
        assert 'steps' in capsys.readouterr().err

    def test_zero_steps_override(self):
        assert bezier_viewer.main(['--quiet', '--steps', '0']) == EXIT_BAD_CONFIG

    def test_export_failure(self, tmp_path):
        out = tmp_path / 'missing' / 'out.png'
        assert bezier_viewer.main(['--quiet', '--export', str(out)]) == EXIT_EXPORT_FAILED

    def test_bad_size_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            bezier_viewer.main(['--quiet', '--size', 'big'])
        assert exc.value.code == 2


def test_load_config_applies_overrides():
    args = bezier_viewer.build_parser().parse_args(['--steps', '7', '--size', '10x20'])
    scene = bezier_viewer.load_config(args)
    assert scene.steps == 7
    assert scene.canvas_size == (10, 20)


def test_oversized_canvas_is_config_error(capsys):
    assert bezier_viewer.main(['--quiet', '--size', '100000x100']) == EXIT_BAD_CONFIG
    assert 'canvas_size' in capsys.readouterr().err
