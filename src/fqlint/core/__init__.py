"""Core enumerations and exceptions shared across the package."""
