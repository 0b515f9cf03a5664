"""
Logging Setup
^^^^^^^^^^^^^
Provides a setup_logger function to configure the logging tree of an
application embedding this package using an INI style `logger.cfg`.

The package itself never configures logging; its modules only log through
`logging.getLogger(__name__)`.
"""
import configparser
import logging
import logging.config
import os
from typing import Optional

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "logger.cfg"
)


def setup_logger(
    name: str, config_path: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with the provided name using `config_path` (the bundled
    `logger.cfg` by default).
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config = configparser.ConfigParser()
    if not config.read(config_path):
        raise FileNotFoundError(
            f"logging configuration `{config_path}` does not exist"
        )
    logging.config.fileConfig(config, disable_existing_loggers=False)

    logger = logging.getLogger(name)

    return logger
