# foodquick/__init__.py
"""Food Quick: capture an order, assign a driver and write the invoice"""

__version__ = '1.0.0'
