"""Game engine building blocks: components, events, systems, text layout, terrain, UI geometry, materials and logging."""

__version__ = "0.1.0"