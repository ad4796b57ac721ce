"""
Test Reader Configuration
=========================
"""

import pytest

from flysight.config import CONFIG_ENV_VAR, ConfigurationError, ReaderConfig, load_config, validate_config


def test_defaults():
    """No file, no env var: built-in defaults."""
    config = ReaderConfig()
    assert config.min_header_matches == 3
    assert config.encoding == 'utf-8-sig'


def test_load_default_without_env(monkeypatch):
    """load_config() without path or env var returns defaults."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_config() == ReaderConfig()


def test_load_yaml(tmp_path):
    """Values in YAML override defaults; missing keys keep theirs."""
    path = tmp_path / 'flysight.yaml'
    path.write_text('min_header_matches: 5\n')

    config = load_config(path)
    assert config.min_header_matches == 5
    assert config.encoding == 'utf-8-sig'


def test_load_from_env(tmp_path, monkeypatch):
    """FLYSIGHT_CONFIG points at the file when no path is given."""
    path = tmp_path / 'flysight.yaml'
    path.write_text('encoding: latin-1\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().encoding == 'latin-1'


def test_empty_yaml(tmp_path):
    """Empty file means defaults."""
    path = tmp_path / 'flysight.yaml'
    path.write_text('')
    assert load_config(path) == ReaderConfig()


def test_missing_file(tmp_path):
    """An explicitly named file must exist."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'nope.yaml')


def test_invalid_values():
    """Every problem is reported in one error."""
    with pytest.raises(ConfigurationError) as excinfo:
        validate_config({'min_header_matches': 0, 'encoding': 'no-such-codec', 'colour': 'red'})

    message = str(excinfo.value)
    assert 'min_header_matches' in message
    assert 'no-such-codec' in message
    assert 'colour: unknown setting' in message


@pytest.mark.parametrize('value', [True, '3', 3.0, 13])
def test_invalid_min_header_matches(value):
    """min_header_matches must be an int in 1..12."""
    with pytest.raises(ConfigurationError):
        ReaderConfig.from_dict({'min_header_matches': value})


def test_not_a_mapping(tmp_path):
    """Top-level YAML must be a mapping."""
    path = tmp_path / 'flysight.yaml'
    path.write_text('- a\n- b\n')
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_bad_yaml(tmp_path):
    """YAML syntax errors become ConfigurationError."""
    path = tmp_path / 'flysight.yaml'
    path.write_text('min_header_matches: [1\n')
    with pytest.raises(ConfigurationError):
        load_config(path)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
