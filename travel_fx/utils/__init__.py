"""Shared utilities: errors, logging and decorators."""
