"""A small real-time strategy sandbox built on an entity-component-system engine."""

__version__ = "0.0.1"