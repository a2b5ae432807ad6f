"""TinyGet services package."""
