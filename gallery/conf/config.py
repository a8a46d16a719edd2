import os
import copy
from pathlib import Path
from typing import Dict, Optional
import yaml

ROOT_DIR = Path(os.path.dirname(__file__)).parent.parent.resolve()
DEFAULT_CONFIG_FILENAME = 'gallery.yaml'
CONFIG_PATH_ENV = 'GALLERY_CONFIG'

DEFAULTS = {
    'server': {
        'host': '0.0.0.0',
        'port': 8080,
        'logging': {'level': 'info'},
    },
    'directus': {
        'host': 'https://content.carterjs.com',
        'folder_id': '360ad7fe-dbe0-4ffc-af2b-9347027dc0a8',
        'token': '',
    },
}

# environment variable -> (section, key)
ENV_OVERRIDES = {
    'PORT': ('server', 'port'),
    'DIRECTUS_HOST': ('directus', 'host'),
    'DIRECTUS_FOLDER_ID': ('directus', 'folder_id'),
    'DIRECTUS_TOKEN': ('directus', 'token'),
}


def _merge(base: Dict, override: Dict) -> Dict:
    merged = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Configuration:
    """
    Read-only process configuration.

    Built once at startup from the defaults, an optional YAML file and the
    environment (in increasing order of precedence), then handed to whatever
    needs it. There are no setters.
    """

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> None:
        environ = os.environ if environ is None else environ
        self.config_path: str = config_path \
            or environ.get(CONFIG_PATH_ENV) \
            or os.path.join(ROOT_DIR, DEFAULT_CONFIG_FILENAME)
        self._config: Dict = {}
        self._load_config(environ)

    def _load_config(self, environ) -> None:
        config = copy.deepcopy(DEFAULTS)
        if os.path.exists(self.config_path):
            with open(self.config_path, 'r') as config_file:
                config = _merge(config, yaml.safe_load(config_file) or {})

        for name, (section, key) in ENV_OVERRIDES.items():
            if name in environ:
                config[section][key] = environ[name]
        if 'LOG_LEVEL' in environ:
            config['server']['logging'] = {'level': environ['LOG_LEVEL']}

        try:
            config['server']['port'] = int(config['server']['port'])
        except (TypeError, ValueError):
            raise ValueError(f"invalid port: {config['server']['port']!r}")

        config['directus']['host'] = str(config['directus']['host']).rstrip('/')
        config['directus']['token'] = config['directus']['token'] or ''
        self._config = config

    def get_port(self) -> int:
        return self._config['server']['port']

    def get_host(self) -> str:
        return self._config['server']['host']

    def get_log_level(self) -> str:
        return self._config['server']['logging'].get('level') or 'info'

    def get_directus_host(self) -> str:
        return self._config['directus']['host']

    def get_folder_id(self) -> str:
        return self._config['directus']['folder_id']

    def get_token(self) -> str:
        return self._config['directus']['token']

    def get_files_api_url(self) -> str:
        return self.get_directus_host() + '/files'

    def get_assets_url(self, asset_id: str) -> str:
        return self.get_directus_host() + f'/assets/{asset_id}'
