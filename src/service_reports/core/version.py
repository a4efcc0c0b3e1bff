"""Version information for service-reports."""

__version__ = "1.0.0"
