"""Core enums and exceptions."""
