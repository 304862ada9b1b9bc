"""
Logging configuration for the tocookie package
"""

import logging
import logging.config
from typing import Any, Dict


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for the tocookie logger."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            "tocookie": {
                "handlers": ["default"],
                "level": level.upper(),
                "propagate": False
            }
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the tocookie logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
