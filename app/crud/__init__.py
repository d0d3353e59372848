from .inventory import inventory_item

__all__ = ["inventory_item"]
