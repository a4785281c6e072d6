# foodquick/models/restaurant.py
"""Restaurant model"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Restaurant:
    """The restaurant preparing the order"""
    name: str
    location: str
    contact_number: str
    
    def __str__(self) -> str:
        return (f"Restaurant(name='{self.name}', location='{self.location}', "
                f"contact_number='{self.contact_number}')")
