# foodquick/models/order.py
"""Order model"""
from typing import List, Optional
from foodquick.models.customer import Customer
from foodquick.models.restaurant import Restaurant
from foodquick.models.meal import Meal


class Order:
    """Assembles the meals, instructions and parties of one order"""
    
    def __init__(self, customer: Customer, restaurant: Restaurant,
                 meals: Optional[List[Meal]] = None, instructions: str = ''):
        self.customer = customer
        self.restaurant = restaurant
        self.meals: List[Meal] = []
        self.instructions = instructions
        for meal in meals or []:
            self.add_meal(meal)
    
    def add_meal(self, meal: Meal) -> None:
        """Append a meal line to the order"""
        if not isinstance(meal, Meal):
            raise TypeError(f"Expected Meal, got {type(meal).__name__}")
        self.meals.append(meal)
    
    @property
    def total(self) -> float:
        """Sum of price x quantity over all meals, unrounded"""
        return sum((meal.subtotal for meal in self.meals), 0.0)
    
    def __repr__(self) -> str:
        return (f"Order({self.customer.order_number}, {self.restaurant.name}, "
                f"{len(self.meals)} meals)")
