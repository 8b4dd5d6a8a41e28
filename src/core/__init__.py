"""
Core business logic package for the restaurant store.

Configuration, data access and record handling live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
