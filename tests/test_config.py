from pathlib import Path

import pytest

from serpscrape.config import Config, SearchSettings, config
from serpscrape.exceptions import ConfigurationError
from serpscrape.schema import SearchOptions

ENV_KEYS = ("SERPSCRAPE_CONFIG", "SERPSCRAPE_LANG", "SERPSCRAPE_REGION", "SERPSCRAPE_PROXY", "SERPSCRAPE_TIMEOUT", "PROXY_SERVER")

@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Points the config singleton at a temporary file and restores it afterwards."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    config_file = tmp_path / "serpscrape.toml"
    monkeypatch.setenv("SERPSCRAPE_CONFIG", str(config_file))
    yield config_file
    monkeypatch.undo()
    config.reload()

def test_config_is_singleton():
    assert Config() is config

def test_defaults_without_file(isolated_config: Path):
    config.reload()
    assert config.search == SearchSettings()
    assert config.search.to_options() == SearchOptions()
    assert config.logging.file_logging is False

def test_values_from_toml(isolated_config: Path):
    isolated_config.write_text(
        '[search]\nnum_results = 20\nlang = "de"\nregion = "ch"\nunique = true\n\n[logging]\nprint_level = "WARNING"\n'
    )
    config.reload()
    options = config.search.to_options()
    assert options.num_results == 20
    assert options.lang == "de"
    assert options.region == "ch"
    assert options.unique is True
    assert config.logging.print_level == "WARNING"

def test_environment_overrides_file(isolated_config: Path, monkeypatch: pytest.MonkeyPatch):
    isolated_config.write_text('[search]\nlang = "de"\n')
    monkeypatch.setenv("SERPSCRAPE_LANG", "it")
    monkeypatch.setenv("SERPSCRAPE_TIMEOUT", "1500")
    monkeypatch.setenv("PROXY_SERVER", "http://proxy.local:3128")
    config.reload()
    assert config.search.lang == "it"
    assert config.search.timeout == 1500
    assert config.search.proxy == "http://proxy.local:3128"

def test_invalid_toml_raises(isolated_config: Path):
    isolated_config.write_text("[search\nlang = ")
    with pytest.raises(ConfigurationError):
        config.reload()

def test_invalid_values_raise(isolated_config: Path):
    isolated_config.write_text('[search]\nsafe = "sometimes"\n')
    with pytest.raises(ConfigurationError):
        config.reload()
