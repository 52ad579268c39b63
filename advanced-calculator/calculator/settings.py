"""Calculator runtime configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from calculator.config_utils import env_bool, env_choice, env_int, env_str


THEMES = ("dark", "light")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CalculatorConfig:
    """Configuration for the calculator app.

    Environment variables:
    - CALC_PRECISION: Significant digits kept in results (default: 12)
    - CALC_DEFAULT_THEME: "dark" or "light" (default: dark)
    - CALC_HISTORY_LIMIT: Number of calculations kept in history (default: 20)
    - CALC_KEYBOARD_INPUT: Show the keyboard entry box (default: true)
    - CALC_LOG_LEVEL: Root log level used by the app (default: WARNING)
    """

    precision: int = 12
    default_theme: str = "dark"
    history_limit: int = 20
    keyboard_input: bool = True
    log_level: str = "WARNING"

    @property
    def dark_by_default(self) -> bool:
        return self.default_theme == "dark"

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        return cls(
            precision=env_int("CALC_PRECISION", 12, minimum=1, maximum=17),
            default_theme=env_choice("CALC_DEFAULT_THEME", "dark", THEMES),
            history_limit=env_int("CALC_HISTORY_LIMIT", 20, minimum=0),
            keyboard_input=env_bool("CALC_KEYBOARD_INPUT", True),
            log_level=env_str("CALC_LOG_LEVEL", "WARNING").upper(),
        )


# Global config instance
_config: Optional[CalculatorConfig] = None


def get_config() -> CalculatorConfig:
    """Get the calculator configuration (cached)."""
    global _config
    if _config is None:
        _config = CalculatorConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None


def configure_logging(config: Optional[CalculatorConfig] = None) -> None:
    cfg = config or get_config()
    level = cfg.log_level if cfg.log_level in LOG_LEVELS else "WARNING"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
