from enum import StrEnum


class Defaults:
    """Built-in defaults used when no configuration overrides them."""

    HOST = '127.0.0.1'
    PORT = 3002
    LINKS_FILE = 'data/links.json'
    BACKEND = 'file'


class Shortcode:
    """Shortcode generation parameters."""

    RANDOM_BYTES = 4  # hex encoded => 8 characters, 32 bits of entropy


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'

    class Server(StrEnum):
        PORT = 'PORT'
        LINKS_FILE = 'LINKS_FILE'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'

# Log event tags
REQUEST_RECEIVED = 'REQUEST_RECEIVED'
LINK_CREATED = 'LINK_CREATED'
LINK_REJECTED = 'LINK_REJECTED'
STORE_FAILURE = 'STORE_FAILURE'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
