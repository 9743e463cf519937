"""Core data model for a CAD application: signals, colours, entities, layers, bodies, shapes and serialization."""

__version__ = "0.1.0"