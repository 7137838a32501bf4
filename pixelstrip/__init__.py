"""LED strip colour types, palettes, bit transposition, pixel views and controller management."""

__version__ = "0.1.0"