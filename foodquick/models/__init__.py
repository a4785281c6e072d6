# foodquick/models/__init__.py
"""Data models for customers, restaurants, meals, drivers and orders"""

from .customer import Customer
from .restaurant import Restaurant
from .meal import Meal
from .driver import DriverRecord
from .order import Order

__all__ = ['Customer', 'Restaurant', 'Meal', 'DriverRecord', 'Order']
