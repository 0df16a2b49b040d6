"""
Logging configuration for the downloader assistant.
Console only: transport errors are kept for operator inspection, never persisted.
"""

import logging
import logging.config
from typing import Any, Dict

from ytdl_assistant.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root, package and httpx loggers."""
    config: Dict[str, Any] = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': 'standard',
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            'ytdl_assistant': {
                'level': level,
                'handlers': ['console'],
                'propagate': False
            },
            # httpx logs full request URLs, which carry the Gemini key
            'httpx': {
                'level': 'WARNING',
                'handlers': ['console'],
                'propagate': False
            }
        },
        'root': {
            'level': level,
            'handlers': ['console']
        }
    }

    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured at level %s", level)
