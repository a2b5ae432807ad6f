"""TinyGet - a simple HTTP load testing tool."""

__version__ = "0.1.0"
