# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: CLI logging, progress spinner, rich tables

from . import logging

__all__ = [
    "logging",
]
