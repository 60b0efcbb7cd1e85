"""Building blocks for feature-oriented end-to-end tests: features, steps, flags and configuration."""

__version__ = "0.1.0"
__all__ = ["envconf", "features", "flags", "types"]