"""Utility functions for application configuration management.

Configuration lives in YAML files, one per application environment
(`APP_ENV`), under the project's `config/` directory:

    config/
    ├── local.yml
    └── prod.yml

Each file follows this structure:

    active_backend: file
    server:
      host: 127.0.0.1
      port: 3002
    backends:
      file:
        path: data/links.json
      redis:
        host: localhost
        port: 6379
        db: 0

A few environment variables override individual keys: `PORT` overrides
`server.port` and `LINKS_FILE` overrides `backends.file.path`.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), 'local' by default.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the Redis key prefix `<app name>:<app env>`, or None.

    project_root() -> Path
        Return the project root directory, using `PROJECT_ROOT` when available.

    load_config(env: str | None = None) -> dict
        Load and normalize the configuration for an environment.

    build_dao(config: dict) -> LinkTableBaseDAO
        Construct the data access object for the active backend.

Example:
    >>> from linkshortener.utils.config import load_config, build_dao
    >>> config = load_config()
    >>> config['server']['port']
    3002
    >>> build_dao(config)
    <LinkTableFileDAO path='.../data/links.json'>
"""

import os
import copy
import logging
from pathlib import Path

import yaml

from linkshortener.types import AppConfiguration
from linkshortener.constants import ENV, Defaults
from linkshortener.exceptions import BadConfigurationError
from linkshortener.dao import LinkTableBaseDAO, LinkTableFileDAO, LinkTableRedisDAO


logger = logging.getLogger(__name__)

DEFAULT_CONFIG: AppConfiguration = {
    'active_backend': Defaults.BACKEND,
    'server': {
        'host': Defaults.HOST,
        'port': Defaults.PORT,
    },
    'backends': {
        'file': {'path': Defaults.LINKS_FILE},
        'redis': {'host': 'localhost', 'port': 6379, 'db': 0},
    },
}


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, Path(__file__).resolve().parents[2]))


def app_prefix() -> str | None:
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(env: str | None = None) -> AppConfiguration:
    """Load configuration for an application environment

    Reads `config/<env>.yml` relative to the project root, layers it over the
    built-in defaults and applies environment variable overrides. A missing
    file is not an error: the defaults are used.

    Args:
        env (str | None):
            Environment name. Defaults to app_env().

    Returns:
        dict: The merged configuration.

    Raises:
        BadConfigurationError:
            If the YAML is malformed, is not a mapping, names an unknown
            backend, or holds a non-integer port.

    Example:
        >>> os.environ['PORT'] = '8080'
        >>> load_config('local')['server']['port']
        8080
    """
    env = env or app_env()
    path = project_root() / 'config' / f'{env}.yml'

    try:
        with open(path, encoding='utf-8') as f:
            document = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.debug('No configuration file found. Using defaults.', extra={'configPath': str(path)})
        document = {}
    except yaml.YAMLError as e:
        raise BadConfigurationError(f'Malformed configuration file {path}: {e}') from e

    if not isinstance(document, dict):
        raise BadConfigurationError(f'Configuration file {path} must hold a mapping.')

    config = _merge(DEFAULT_CONFIG, document)

    if port := os.environ.get(ENV.Server.PORT):
        config['server']['port'] = port
    if links_file := os.environ.get(ENV.Server.LINKS_FILE):
        config['backends']['file']['path'] = links_file

    try:
        config['server']['port'] = int(config['server']['port'])
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f"Server port must be an integer (given value: {config['server']['port']!r}).") from e

    if config['active_backend'] not in config['backends']:
        raise BadConfigurationError(f"Unknown backend '{config['active_backend']}'.")

    logger.debug('Loaded configuration.', extra={'configPath': str(path), 'backend': config['active_backend']})
    return config


def build_dao(config: AppConfiguration) -> LinkTableBaseDAO:
    """Construct the data access object for the configured backend

    Relative file paths are resolved against the project root.

    Raises:
        BadConfigurationError: If the active backend is not supported.
        StoreUnavailableError: If the Redis backend can't be reached.
    """
    backend = config['active_backend']
    options = config['backends'][backend]

    match backend:
        case 'file':
            path = Path(options['path'])
            if not path.is_absolute():
                path = project_root() / path
            return LinkTableFileDAO(path=path)
        case 'redis':
            return LinkTableRedisDAO(prefix=app_prefix(), **options)
        case _:
            raise BadConfigurationError(f"Unsupported backend '{backend}'.")
