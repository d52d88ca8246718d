"""Configuration management with environment variable support."""

import logging
import os
import sys
from dataclasses import dataclass, field
from decimal import Decimal

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    initial_balance: Decimal = field(
        default_factory=lambda: Decimal(os.getenv("BLACKJACK_INITIAL_BALANCE", "1000"))
    )
    # Dealer draws while below this total; soft totals stand too
    dealer_stands_on: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEALER_STANDS_ON", "17"))
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    game: GameConfig = field(default_factory=GameConfig)


def configure_logging(app_config: AppConfig | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    DEBUG=true forces the DEBUG level.
    """
    app_config = app_config or config
    logger = logging.getLogger("blackjack")
    logger.setLevel(logging.DEBUG if app_config.debug else app_config.log_level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    return logger


# Global configuration instance
config = AppConfig()
