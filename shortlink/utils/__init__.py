from shortlink.utils.config import Settings, RedisSettings, app_env, load_settings
from shortlink.utils.helpers import get_short_url, require_environment, guarantee_500_response
from shortlink.utils.shortener import generate_shortcode
from shortlink.utils.auth import authorize
from shortlink.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'authorize',
    'app_env',
    'load_settings',
    'Settings',
    'RedisSettings',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
