"""Functional helpers for collections: emptiness checks, compacting, filling, joins and path assignment."""

__version__ = "0.1.0"
__all__ = ["helpers", "compact", "fill", "mapping", "intersection", "join", "assign"]