# foodquick/capture/__init__.py
"""Interactive console capture"""

from .reader import ConsoleReader
from .prompts import (
    parse_order_number, parse_price, parse_quantity,
    capture_customer, capture_restaurant, capture_meals, capture_instructions,
)

__all__ = [
    'ConsoleReader',
    'parse_order_number', 'parse_price', 'parse_quantity',
    'capture_customer', 'capture_restaurant', 'capture_meals', 'capture_instructions',
]
