import pytest

from inkmark.config import AppConfig, parse_args


def test_defaults_without_arguments():
    config, file_path = parse_args([])

    assert file_path is None
    assert config == AppConfig()
    assert config.render_scale == 1.5
    assert config.highlight_color == (255, 255, 0, 128)
    assert config.output_filename == "edited-sample.pdf"


def test_overrides_from_command_line():
    config, file_path = parse_args(
        ["doc.pdf", "--scale", "2", "--output-name", "out.pdf", "--log-level", "debug", "--dark"]
    )

    assert file_path == "doc.pdf"
    assert config.render_scale == 2.0
    assert config.output_filename == "out.pdf"
    assert config.log_level == "DEBUG"
    assert config.dark_mode is True


def test_non_positive_scale_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--scale", "0"])


def test_config_is_immutable():
    config = AppConfig()
    with pytest.raises(Exception):
        config.render_scale = 3.0
