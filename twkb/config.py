from logging.config import dictConfig
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='TWKB_',
        extra='ignore',
    )

    ENV: Literal['dev', 'test', 'prod'] = 'prod'
    LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING'] | None = None
    LOG_CONFIGURE: bool = False

    # Check declared payload sizes against the data actually read
    VERIFY_SIZE: bool = True


_settings = _Settings()

# -------------------- System Configuration --------------------

ENV = _settings.ENV
LOG_LEVEL = _settings.LOG_LEVEL
LOG_CONFIGURE = _settings.LOG_CONFIGURE

# -------------------- Decoder --------------------

VERIFY_SIZE = _settings.VERIFY_SIZE

if LOG_LEVEL is None:
    LOG_LEVEL = 'INFO' if ENV == 'prod' else 'DEBUG'  # pyright: ignore[reportConstantRedefinition]

# -------------------- Logging configuration --------------------

# only the package logger is touched, the root logger belongs to the application
if LOG_CONFIGURE:
    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'default': {
                'formatter': 'default',
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
            },
        },
        'loggers': {
            'twkb': {'handlers': ['default'], 'level': LOG_LEVEL, 'propagate': False},
        },
    })
