"""
Configuration management for SnapCook application.

Handles environment variables, pipeline thresholds, and application configuration.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Application configuration settings"""

    # Detection settings
    confidence_threshold: float = 0.25

    # Recipe ranking settings
    quick_recipe_bonus: float = 0.12
    quick_recipe_minutes: int = 20
    recipe_limit: int = 20

    # Streamlit settings
    debug_mode: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/snapcook.log"

    def __post_init__(self):
        """Clamp values that would break the pipeline"""
        self.confidence_threshold = min(max(float(self.confidence_threshold), 0.0), 1.0)
        if self.recipe_limit < 0:
            self.recipe_limit = 0

    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from environment variables"""
        return cls(
            # Detection
            confidence_threshold=float(os.getenv("SNAPCOOK_CONFIDENCE_THRESHOLD", "0.25")),

            # Ranking
            quick_recipe_bonus=float(os.getenv("SNAPCOOK_QUICK_BONUS", "0.12")),
            quick_recipe_minutes=int(os.getenv("SNAPCOOK_QUICK_MINUTES", "20")),
            recipe_limit=int(os.getenv("SNAPCOOK_RECIPE_LIMIT", "20")),

            # Streamlit
            debug_mode=os.getenv("SNAPCOOK_DEBUG", "false").lower() == "true",

            # Logging
            log_level=os.getenv("SNAPCOOK_LOG_LEVEL", "INFO"),
            log_file=os.getenv("SNAPCOOK_LOG_FILE", "logs/snapcook.log")
        )


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = Config.from_environment()
    return _config


def reload_config():
    """Reload configuration from environment"""
    global _config
    _config = None
    return get_config()
