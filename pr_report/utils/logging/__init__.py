from .config import LoggerConfig, LogLevel, create_config, initialize
from .formatters import SecretMaskingFormatter, clear_secrets, register_secret

__all__ = [
    "LogLevel",
    "LoggerConfig",
    "SecretMaskingFormatter",
    "clear_secrets",
    "create_config",
    "initialize",
    "register_secret",
]
