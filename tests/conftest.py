import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from gallery.conf.config import Configuration


@pytest.fixture
def config(tmp_path) -> Configuration:
    return Configuration(config_path=str(tmp_path / 'missing.yaml'), environ={
        'DIRECTUS_HOST': 'https://cms.example.com',
        'DIRECTUS_FOLDER_ID': 'folder-1',
        'DIRECTUS_TOKEN': '',
    })


@pytest.fixture
def token_config(tmp_path) -> Configuration:
    return Configuration(config_path=str(tmp_path / 'missing.yaml'), environ={
        'DIRECTUS_HOST': 'https://cms.example.com',
        'DIRECTUS_FOLDER_ID': 'folder-1',
        'DIRECTUS_TOKEN': 's3cret',
    })
