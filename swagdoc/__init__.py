"""Swagger 2.0 annotation tools: comment formatting for Go sources and struct-tag reading."""

__version__ = "0.1.0"