"""
engine.
=======

Does: Palette generation pipeline (color math, providers, accessibility,
      token formats, orchestration). Import from the submodules; this
      package initializer stays empty so leaf modules import cleanly.
"""

__all__: list[str] = []
__docformat__ = "google"
