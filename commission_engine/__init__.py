"""Hotel commission calculation and reporting engine."""

__version__ = "1.0.0"
