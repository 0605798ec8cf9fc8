from .simple import Mode, PlacedOrder, SimpleStrategy

__all__ = ["Mode", "PlacedOrder", "SimpleStrategy"]
