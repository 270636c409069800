"""scenectl: console scene drawing built from classic object-oriented patterns."""

__version__ = "0.3.0"
