"""Small utilities: system errors, optionals, strings, file attributes and timezones."""

__version__ = "0.1.0"
__all__ = ["errors", "fileattributes", "option", "strings", "timezones"]