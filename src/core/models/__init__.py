"""
Pydantic models for the restaurant store.
"""

from core.models.restaurant import Restaurant

__all__ = ["Restaurant"]
