# foodquick/io/__init__.py
"""Input/Output operations"""

from .loader import RosterLoader, RosterLoadResult
from .saver import InvoiceWriter, render_invoice

__all__ = ['RosterLoader', 'RosterLoadResult', 'InvoiceWriter', 'render_invoice']
