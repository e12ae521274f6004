"""recordcheck: declarative schema validation for untyped records."""

__version__ = "0.3.0"
