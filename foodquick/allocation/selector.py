# foodquick/allocation/selector.py
"""Least-loaded driver selection"""
from typing import Iterable, List, Optional
from foodquick.models import DriverRecord, Customer, Restaurant
from foodquick.allocation.validator import DeliveryValidator


def select_driver(roster: Iterable[DriverRecord], city: str) -> Optional[DriverRecord]:
    """Return the driver in city with the smallest load.
    
    Cities match case-insensitively. On equal loads the driver listed
    first wins. Returns None when nobody serves the city.
    """
    chosen = None
    for driver in roster:
        if not driver.serves(city):
            continue
        if chosen is None or driver.load < chosen.load:
            chosen = driver
    return chosen


class DriverSelector:
    """Runs the delivery checks and picks a driver for an order"""
    
    def __init__(self, drivers: Iterable[DriverRecord]):
        self.drivers = tuple(drivers)
        self.validator = DeliveryValidator(self.drivers)
        self.issues: List[str] = []
    
    def assign(self, customer: Customer, restaurant: Restaurant) -> Optional[DriverRecord]:
        """Pick the driver for an order, or None if it cannot be delivered"""
        self.issues = self.validator.validate(customer, restaurant)
        if self.issues:
            return None
        return select_driver(self.drivers, restaurant.location)
