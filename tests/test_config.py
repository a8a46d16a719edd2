import pytest

from gallery.conf.config import Configuration


def test_defaults(tmp_path):
    config = Configuration(config_path=str(tmp_path / 'missing.yaml'), environ={})

    assert config.get_port() == 8080
    assert config.get_directus_host() == 'https://content.carterjs.com'
    assert config.get_folder_id() == '360ad7fe-dbe0-4ffc-af2b-9347027dc0a8'
    assert config.get_token() == ''
    assert config.get_log_level() == 'info'


def test_yaml_file_then_environment(tmp_path):
    config_file = tmp_path / 'gallery.yaml'
    config_file.write_text(
        'server:\n'
        '  port: 9000\n'
        '  logging:\n'
        '    level: debug\n'
        'directus:\n'
        '  host: https://cms.internal/\n'
        '  folder_id: from-file\n'
    )

    config = Configuration(config_path=str(config_file), environ={'DIRECTUS_FOLDER_ID': 'from-env'})

    assert config.get_port() == 9000
    assert config.get_log_level() == 'debug'
    assert config.get_directus_host() == 'https://cms.internal'
    assert config.get_folder_id() == 'from-env'
    assert config.get_files_api_url() == 'https://cms.internal/files'


def test_environment_from_process(tmp_path, monkeypatch):
    monkeypatch.setenv('PORT', '3000')
    monkeypatch.setenv('DIRECTUS_TOKEN', 'abc')
    monkeypatch.setenv('GALLERY_CONFIG', str(tmp_path / 'missing.yaml'))

    config = Configuration()

    assert config.get_port() == 3000
    assert config.get_token() == 'abc'


def test_empty_environment_value_wins(tmp_path):
    config_file = tmp_path / 'gallery.yaml'
    config_file.write_text('directus:\n  token: from-file\n')

    config = Configuration(config_path=str(config_file), environ={'DIRECTUS_TOKEN': ''})

    assert config.get_token() == ''


def test_invalid_port(tmp_path):
    with pytest.raises(ValueError):
        Configuration(config_path=str(tmp_path / 'missing.yaml'), environ={'PORT': 'eighty'})
