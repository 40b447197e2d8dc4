"""Tests for configuration, logging and timing helpers."""

import io

import pytest

from docseek.utils.config import Config, get_config, load_config, set_config
from docseek.utils.logging import get_logger, setup_logging
from docseek.utils.timing import TimingContext, timed


def test_defaults():
    config = Config()

    assert config.get("search.prefilter") is True
    assert config.get("search.case") == "smart"
    assert config.get("output.delimiter") == "\t"
    assert config.get("viewer.binary") == "zeal"
    assert config.get("docsets.dir") is None


def test_get_and_set_with_dot_notation():
    config = Config()

    config.set("output.icons", True)
    config.set("brand.new.key", 3)

    assert config.get("output.icons") is True
    assert config.get("brand.new.key") == 3
    assert config.get("missing.key", "fallback") == "fallback"


def test_from_yaml_merges_with_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "search:\n"
        "  prefilter: false\n"
        "output:\n"
        "  glyphs:\n"
        "    function: fn\n"
    )

    config = Config.from_yaml(path)

    assert config.get("search.prefilter") is False
    assert config.get("search.case") == "smart"
    assert config.get("output.glyphs") == {"function": "fn"}
    assert config.get("output.delimiter") == "\t"


def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")

    assert Config.from_yaml(path).to_dict() == Config().to_dict()


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        Config.from_yaml(path)


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.from_yaml(tmp_path / "absent.yml")


def test_to_dict_is_a_copy():
    config = Config()
    data = config.to_dict()
    data["search"]["prefilter"] = False

    assert config.get("search.prefilter") is True


def test_load_config_sets_global(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("viewer:\n  binary: dash\n")

    loaded = load_config(path)

    assert get_config() is loaded
    assert get_config().get("viewer.binary") == "dash"


def test_get_config_from_env(monkeypatch, tmp_path):
    path = tmp_path / "env.yml"
    path.write_text("search:\n  case: ignore\n")
    monkeypatch.setenv("DOCSEEK_CONFIG", str(path))
    set_config(None)

    assert get_config().get("search.case") == "ignore"


def test_get_config_bad_env_falls_back(monkeypatch, tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("search: [unclosed\n")
    monkeypatch.setenv("DOCSEEK_CONFIG", str(path))
    monkeypatch.chdir(tmp_path)
    set_config(None)

    assert get_config().get("search.case") == "smart"


def test_logger_names_are_namespaced():
    assert get_logger("docseek.core").name == "docseek.core"
    assert get_logger("plugin").name == "docseek.plugin"


def test_setup_logging_writes_to_stream():
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)

    get_logger("docseek.test").info("hello")
    get_logger("docseek.test").debug("hidden")

    output = stream.getvalue()
    assert "hello" in output
    assert "INFO" in output
    assert "hidden" not in output

    setup_logging("WARNING")


def test_timing_context_records_duration():
    with TimingContext("work") as timing:
        sum(range(100))

    assert timing["duration_ms"] >= 0


def test_timed_preserves_function():
    @timed("adder")
    def add(a, b):
        """Add numbers."""
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == "add"
    assert add.__doc__ == "Add numbers."
