"""TinyGet core package."""
