"""Errors — base exception, predefined API errors and CLI client errors."""
