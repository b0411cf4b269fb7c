"""Voxel sandbox game model: block world, calendar, lighting, entities, menus and saves."""

__version__ = "0.1.0"