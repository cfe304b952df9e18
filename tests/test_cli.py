from pathlib import Path

import pytest
from click.testing import CliRunner

from oddseq._cli import cli, load_config, on_each
from oddseq._version import version


def test_demo_defaults() -> None:
    """Tests the demo prints the odd positions of 1..100."""
    result = CliRunner().invoke(cli, ["demo"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    printed = [line for line in lines if line.startswith("filtered element")]
    assert printed[0] == "filtered element: 1"
    assert printed[-1] == "filtered element: 99"
    assert len(printed) == 50
    assert f"version: {version}" in result.output
    assert "collected 50 elements" in result.output


def test_demo_overrides() -> None:
    """Tests that command line options take effect."""
    result = CliRunner().invoke(
        cli, ["demo", "--start", "1", "--stop", "4", "--label", "odd"]
    )
    assert result.exit_code == 0, result.output
    assert "odd: 1\nodd: 3\n" in result.output
    assert "odd: 2" not in result.output
    assert "collected 2 elements" in result.output


def test_demo_config_file(tmp_path: Path) -> None:
    """Tests the demo reads its settings from a YAML config file, with
    options taking precedence.
    """
    conf_path = tmp_path / "demo.yaml"
    conf_path.write_text("start: 10\nstop: 14\nlabel: kept\n")
    result = CliRunner().invoke(cli, ["--config", str(conf_path), "demo"])
    assert result.exit_code == 0, result.output
    assert "kept: 10\nkept: 12\nkept: 14\n" in result.output
    result = CliRunner().invoke(
        cli, ["--config", str(conf_path), "demo", "--stop", "10"]
    )
    assert "kept: 10\n" in result.output
    assert "collected 1 elements" in result.output


def test_config_unknown_key(tmp_path: Path) -> None:
    """Tests that unknown settings in the config file are rejected."""
    conf_path = tmp_path / "demo.yaml"
    conf_path.write_text("step: 3\n")
    result = CliRunner().invoke(cli, ["--config", str(conf_path), "demo"])
    assert result.exit_code == 2
    assert "--config" in result.output


def test_load_config_defaults() -> None:
    conf = load_config()
    assert (conf.start, conf.stop, conf.label) == (1, 100, "filtered element")


def test_demo_empty_range() -> None:
    """Tests an empty range warns and collects nothing."""
    with pytest.warns(UserWarning, match="empty"):
        result = CliRunner().invoke(
            cli, ["demo", "--start", "5", "--stop", "4"]
        )
    assert result.exit_code == 0, result.output
    assert "collected 0 elements" in result.output


def test_on_each_is_lazy() -> None:
    """Tests the side effect runs only as elements are pulled."""
    seen = []
    passthrough = on_each([1, 2, 3], seen.append)
    assert seen == []
    assert next(passthrough) == 1
    assert seen == [1]
    assert list(passthrough) == [2, 3]
    assert seen == [1, 2, 3]
