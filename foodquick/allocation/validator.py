# foodquick/allocation/validator.py
"""Delivery eligibility checks"""
from typing import Iterable, List
from foodquick.models import DriverRecord, Customer, Restaurant
from foodquick.utils import same_city


class DeliveryValidator:
    """Checks whether an order can be delivered by the roster's drivers"""
    
    def __init__(self, drivers: Iterable[DriverRecord]):
        self.drivers = tuple(drivers)
    
    def has_driver_in(self, city: str) -> bool:
        return any(driver.serves(city) for driver in self.drivers)
    
    def validate(self, customer: Customer, restaurant: Restaurant) -> List[str]:
        """Return the reasons the order cannot be delivered; empty if it can"""
        issues = []
        
        if not self.has_driver_in(customer.city):
            issues.append(f"No driver serves the customer's city '{customer.city}'")
        
        if not self.has_driver_in(restaurant.location):
            issues.append(f"No driver serves the restaurant's city '{restaurant.location}'")
        
        if not same_city(customer.city, restaurant.location):
            issues.append(
                f"Customer city '{customer.city}' differs from restaurant "
                f"city '{restaurant.location}'"
            )
        
        return issues
    
    def is_deliverable(self, customer: Customer, restaurant: Restaurant) -> bool:
        return not self.validate(customer, restaurant)
