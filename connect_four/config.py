"""
Configuration for the Connect Four web app.
"""

import logging
import os


class AppConfig:
    """Server and logging settings."""

    def __init__(self):
        # Server
        self.host = "127.0.0.1"
        self.port = 5000
        self.debug = False
        self.secret_key = "connect4_secret_key_change_in_production"

        # Logging
        self.log_level = "INFO"
        self.log_dir = None  # Log to stderr only unless set

    @classmethod
    def from_env(cls, environ=None) -> "AppConfig":
        """Build a config, overriding defaults from CONNECT4_* variables."""
        environ = os.environ if environ is None else environ
        config = cls()
        config.host = environ.get("CONNECT4_HOST", config.host)
        config.port = int(environ.get("CONNECT4_PORT", config.port))
        config.debug = environ.get("CONNECT4_DEBUG", "").lower() in ("1", "true", "yes")
        config.secret_key = environ.get("CONNECT4_SECRET_KEY", config.secret_key)
        config.log_level = environ.get("CONNECT4_LOG_LEVEL", config.log_level).upper()
        config.log_dir = environ.get("CONNECT4_LOG_DIR") or config.log_dir
        return config


def configure_logging(config: AppConfig) -> None:
    """Set up root logging from the config."""
    handlers = [logging.StreamHandler()]
    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(config.log_dir, 'connect4.log')))

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )
