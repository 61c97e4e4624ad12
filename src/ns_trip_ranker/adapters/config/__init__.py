"""Configuration adapters."""

from ns_trip_ranker.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
