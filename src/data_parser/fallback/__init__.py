"""
Fallback for the data parser.
Supplies sample data when every detector rejects the input.
"""

from .fallback_generator import FallbackGenerator, create_fallback_result

__all__ = ["FallbackGenerator", "create_fallback_result"]
