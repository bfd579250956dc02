"""Browser-driven page title checks built on selenium and pytest."""

__version__ = "0.1.0"
