"""Procedural terrain height maps, zone planning, meshing and PNG export."""

__version__ = "0.1.0"