"""A JSON document model: parsing, typed values, pointer lookup and mutable containers."""

__version__ = "0.1.0"
__all__ = ["types", "visitor", "value", "containers", "document"]