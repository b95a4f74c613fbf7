"""Same-host link discovery crawler."""

__version__ = "0.1.0"
