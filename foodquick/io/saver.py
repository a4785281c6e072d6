# foodquick/io/saver.py
"""Invoice rendering and saving"""
import os
import stat
import tempfile
from typing import Callable, List, Optional
from foodquick.config import FILE_ENCODING, TOO_FAR_MESSAGE
from foodquick.errors import InvoiceWriteError
from foodquick.models import Customer, Restaurant, Meal, DriverRecord
from foodquick.utils import ensure_directory, format_amount


def render_invoice(customer: Customer, restaurant: Restaurant, meals: List[Meal],
                   instructions: str, total: float,
                   driver: Optional[DriverRecord]) -> str:
    """Render the invoice text. Without a driver the rejection variant is produced."""
    lines = [
        f"Order number: {customer.order_number}",
        f"Customer: {customer.name}",
        f"Email: {customer.email}",
        f"Phone number: {customer.contact_number}",
        f"Location: {customer.city}",
        "",
        f"You have ordered the following from {restaurant.name} in {restaurant.location}:",
        "",
    ]
    
    for meal in meals:
        lines.append(str(meal))
        lines.append("")
    
    lines.append(f"Special instructions: {instructions}")
    lines.append("")
    lines.append(f"Total: {format_amount(total)}")
    lines.append("")
    
    if driver is not None:
        lines.append(
            f"{driver.name} is nearest to the restaurant and so they will be "
            f"delivering your order to you at:"
        )
        lines.append(customer.address)
        lines.append("")
    else:
        lines.append(TOO_FAR_MESSAGE)
    
    lines.append(
        f"If you need to contact the restaurant, their number is "
        f"{restaurant.contact_number}."
    )
    
    return "\n".join(lines) + "\n"


class InvoiceWriter:
    """Handles writing of invoice files"""
    
    def __init__(self, encoding: str = FILE_ENCODING, echo: Callable[[str], None] = print):
        self.encoding = encoding
        self.echo = echo
    
    @staticmethod
    def target_mode(filepath: str) -> int:
        """Permissions the invoice should end up with"""
        try:
            return stat.S_IMODE(os.stat(filepath).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
    
    def write_text(self, filepath: str, text: str) -> str:
        """Replace the file content with text in a single step.
        
        The text is written to a temporary file next to the target and moved
        over it, so a failed write leaves the previous invoice untouched.
        """
        directory = os.path.dirname(os.path.abspath(filepath))
        tmp_path = None
        try:
            ensure_directory(directory)
            fd, tmp_path = tempfile.mkstemp(
                prefix='.invoice-', suffix='.tmp', dir=directory
            )
            with os.fdopen(fd, 'w', encoding=self.encoding, newline='\n') as f:
                f.write(text)
            # mkstemp creates 0600 files
            os.chmod(tmp_path, self.target_mode(filepath))
            os.replace(tmp_path, filepath)
            tmp_path = None
        except (OSError, UnicodeError) as e:
            raise InvoiceWriteError(filepath, e) from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
        
        return filepath
    
    def write_invoice(self, filepath: str, customer: Customer, restaurant: Restaurant,
                      meals: List[Meal], instructions: str, total: float,
                      driver: Optional[DriverRecord]) -> str:
        """Render and save an invoice, accepted or rejected"""
        text = render_invoice(customer, restaurant, meals, instructions, total, driver)
        self.write_text(filepath, text)
        self.echo(f"\n💾 Invoice written to {filepath}")
        return filepath
