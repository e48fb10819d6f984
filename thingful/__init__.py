"""Thingful user registration API."""

__version__ = "1.0.0"
