"""
Shared Library - Common components used across the parser, pipeline and session.

This module contains shared utilities and schemas that are agnostic of any
single parsing strategy and can be reused throughout the system.
"""

__all__ = [
    "models",
    "utils"
]
