# foodquick/main.py
"""Main entry point for Food Quick"""
import sys
from foodquick.config import DRIVERS_FILE, INVOICE_FILE, TOO_FAR_MESSAGE
from foodquick.capture import (
    ConsoleReader, capture_customer, capture_restaurant,
    capture_meals, capture_instructions,
)
from foodquick.io import RosterLoader, InvoiceWriter
from foodquick.allocation import DriverSelector
from foodquick.errors import InvoiceWriteError
from foodquick.models import Order


def take_order(reader: ConsoleReader) -> Order:
    """Run the capture stages in order and assemble the order"""
    customer = capture_customer(reader)
    restaurant = capture_restaurant(reader)
    order = Order(customer, restaurant, capture_meals(reader))
    order.instructions = capture_instructions(reader)
    return order


def run(reader: ConsoleReader, drivers_file: str = DRIVERS_FILE,
        invoice_file: str = INVOICE_FILE) -> int:
    """Capture one order, assign a driver and write the invoice.
    
    Returns the process exit code.
    """
    try:
        order = take_order(reader)
    except EOFError as e:
        reader.say(f"\n❌ {e}")
        return 1
    except UnicodeDecodeError as e:
        reader.say(f"\n❌ Could not read input: {e}")
        return 1
    
    # Evaluate
    reader.say("\n📂 Loading drivers...")
    roster = RosterLoader.load_drivers(drivers_file, echo=reader.say)
    selector = DriverSelector(roster.drivers)
    driver = selector.assign(order.customer, order.restaurant)
    
    if driver is None:
        reader.say(TOO_FAR_MESSAGE)
        for issue in selector.issues:
            reader.say(f"   • {issue}")
    else:
        reader.say(f"🚗 Assigned {driver.name} ({driver.city}, load {driver.load})")
    
    # Write
    try:
        InvoiceWriter(echo=reader.say).write_invoice(
            invoice_file, order.customer, order.restaurant, order.meals,
            order.instructions, order.total, driver
        )
    except InvoiceWriteError as e:
        reader.say(f"❌ Error writing invoice: {e}")
        return 1
    
    return 0


def main() -> int:
    """Console entry point"""
    with ConsoleReader() as reader:
        return run(reader)


if __name__ == "__main__":
    sys.exit(main())
