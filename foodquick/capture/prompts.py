# foodquick/capture/prompts.py
"""Prompts for customer, restaurant, meal and instruction details"""
import re
from typing import Callable, List, TypeVar
from foodquick.capture.reader import ConsoleReader
from foodquick.config import STOP_ANSWERS
from foodquick.errors import InputFormatError
from foodquick.models import Customer, Restaurant, Meal

T = TypeVar('T')

WHOLE_NUMBER = re.compile(r'[+-]?[0-9]+')


def parse_order_number(text: str) -> int:
    value = text.strip()
    if not WHOLE_NUMBER.fullmatch(value):
        raise InputFormatError('order number', text, 'a whole number')
    return int(value)


def parse_price(text: str) -> float:
    value = text.strip()
    if '_' in value:
        raise InputFormatError('price', text, 'a valid price')
    try:
        price = float(value)
    except ValueError:
        raise InputFormatError('price', text, 'a valid price')
    # nan and inf parse as floats but are not prices
    if not (0 <= price < float('inf')):
        raise InputFormatError('price', text, 'a price of 0 or more')
    return price


def parse_quantity(text: str) -> int:
    value = text.strip()
    if not WHOLE_NUMBER.fullmatch(value):
        raise InputFormatError('quantity', text, 'a valid quantity')
    quantity = int(value)
    if quantity < 0:
        raise InputFormatError('quantity', text, 'a quantity of 0 or more')
    return quantity


def parse_required(field: str) -> Callable[[str], str]:
    """Build a parser that rejects blank answers"""
    def parse(text: str) -> str:
        value = text.strip()
        if not value:
            raise InputFormatError(field, text, f"a {field}")
        return value
    return parse


def ask_until_valid(reader: ConsoleReader, label: str, parse: Callable[[str], T]) -> T:
    """Re-prompt a single field until its answer parses"""
    while True:
        answer = reader.ask(label)
        try:
            return parse(answer)
        except InputFormatError as e:
            reader.say(str(e))


def capture_customer(reader: ConsoleReader) -> Customer:
    """Capture the customer details"""
    reader.say("Enter Customer Details:")
    customer = Customer(
        order_number=ask_until_valid(reader, "Order Number", parse_order_number),
        name=reader.ask("Name"),
        contact_number=reader.ask("Contact Number"),
        address=reader.ask("Address"),
        city=reader.ask("City"),
        email=reader.ask("Email"),
    )
    reader.say(f"\nCustomer Created:\n{customer}")
    return customer


def capture_restaurant(reader: ConsoleReader) -> Restaurant:
    """Capture the restaurant details"""
    reader.say("\nEnter Restaurant Details:")
    restaurant = Restaurant(
        name=reader.ask("Name"),
        location=reader.ask("Location"),
        contact_number=reader.ask("Contact Number"),
    )
    reader.say(f"\nRestaurant Created:\n{restaurant}")
    return restaurant


def capture_meals(reader: ConsoleReader) -> List[Meal]:
    """Capture meal lines until the operator answers no"""
    reader.say("\nEnter Order Details:")
    meals = []
    
    while True:
        meals.append(Meal(
            name=ask_until_valid(reader, "Meal Name", parse_required('meal name')),
            price=ask_until_valid(reader, "Meal Price", parse_price),
            quantity=ask_until_valid(reader, "Meal Quantity", parse_quantity),
        ))
        
        answer = reader.ask("Do you want to add another meal? (yes/no)")
        if answer.strip().lower() in STOP_ANSWERS:
            break
    
    return meals


def capture_instructions(reader: ConsoleReader) -> str:
    return reader.ask("Special Instructions")
