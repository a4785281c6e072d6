import pytest

from foodquick.models import Customer, Restaurant, Meal


@pytest.fixture
def customer():
    return Customer(
        order_number=1001,
        name="Jane Doe",
        contact_number="0821234567",
        address="12 Long Street",
        city="CapeTown",
        email="jane@example.com",
    )


@pytest.fixture
def restaurant():
    return Restaurant(name="Mama's Kitchen", location="CapeTown", contact_number="0215550000")


@pytest.fixture
def meals():
    return [Meal("Burger", 50.00, 2), Meal("Fries", 20.00, 1)]


@pytest.fixture
def roster_file(tmp_path):
    """Write roster lines to a file and return its path"""
    def write(*lines):
        path = tmp_path / "drivers-info.txt"
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return str(path)
    return write
