# foodquick/allocation/__init__.py
"""Driver assignment logic"""

from .selector import select_driver, DriverSelector
from .validator import DeliveryValidator

__all__ = ['select_driver', 'DriverSelector', 'DeliveryValidator']
