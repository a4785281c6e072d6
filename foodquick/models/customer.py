# foodquick/models/customer.py
"""Customer model"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """The person placing the order"""
    order_number: int
    name: str
    contact_number: str
    address: str
    city: str
    email: str
    
    def __str__(self) -> str:
        return (f"Customer(order_number={self.order_number}, name='{self.name}', "
                f"contact_number='{self.contact_number}', address='{self.address}', "
                f"city='{self.city}', email='{self.email}')")
