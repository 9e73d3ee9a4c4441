"""Shared helpers: configuration and the exception hierarchy."""
