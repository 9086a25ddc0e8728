"""Recipe of the Day - recipe catalog with categories and per-user favorites."""

__version__ = "0.1.0"
