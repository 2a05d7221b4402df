"""
general.
========

Does: Domain-agnostic helpers (config, logging, observability).
"""

__all__: list[str] = []
__docformat__ = "google"
