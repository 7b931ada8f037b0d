from linkshortener.utils.config import app_env, app_name, project_root, app_prefix, load_config, build_dao
from linkshortener.utils.helpers import json_response, guarantee_500_response
from linkshortener.utils.shortener import generate_shortcode, is_valid_shortcode
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'is_valid_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'build_dao',
    'json_response',
    'guarantee_500_response',
    'initialize_logging',
]
