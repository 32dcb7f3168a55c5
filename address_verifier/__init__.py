"""Address standardization and geocoding through SmartyStreets."""

__version__ = "0.1.0"
