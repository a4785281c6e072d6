# foodquick/models/meal.py
"""Meal line item"""
import math
from dataclasses import dataclass
from foodquick.utils import format_amount


@dataclass(frozen=True)
class Meal:
    """A single order line: name, unit price and quantity"""
    name: str
    price: float
    quantity: int
    
    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("Meal name is required")
        if isinstance(self.price, bool) or not isinstance(self.price, (int, float)):
            raise ValueError(f"Meal price must be a number, got {self.price!r}")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"Meal price must be >= 0, got {self.price}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Meal quantity must be a whole number, got {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError(f"Meal quantity must be >= 0, got {self.quantity}")
    
    @property
    def subtotal(self) -> float:
        return self.price * self.quantity
    
    def __str__(self) -> str:
        return f"{self.quantity} x {self.name} ({format_amount(self.price)})"
