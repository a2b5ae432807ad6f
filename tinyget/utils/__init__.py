"""TinyGet utils package."""
