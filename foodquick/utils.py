# foodquick/utils.py
"""Utility functions"""
import os
from foodquick.config import CURRENCY_SYMBOL


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    if path:
        os.makedirs(path, exist_ok=True)


def same_city(first: str, second: str) -> bool:
    """Case-insensitive city comparison"""
    return first.strip().casefold() == second.strip().casefold()


def format_amount(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format a money amount for display, e.g. R45.00"""
    return f"{symbol}{amount:.2f}"
