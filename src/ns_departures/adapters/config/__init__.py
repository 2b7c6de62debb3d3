"""Configuration adapters."""

from ns_departures.adapters.config.app_config import AppConfig
from ns_departures.adapters.config.station_directory_loader import StationDirectoryLoader

__all__ = ["AppConfig", "StationDirectoryLoader"]
