# foodquick/models/driver.py
"""Driver model"""
from dataclasses import dataclass
from foodquick.utils import same_city


@dataclass(frozen=True)
class DriverRecord:
    """A delivery driver as listed in the roster file.
    
    The load is a snapshot taken when the roster is read; it is never
    written back.
    """
    name: str
    city: str
    load: int
    
    def serves(self, city: str) -> bool:
        """Check if this driver works in the given city"""
        return same_city(self.city, city)
    
    def __repr__(self) -> str:
        return f"DriverRecord({self.name}, {self.city}, {self.load})"
