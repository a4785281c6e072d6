import os
import stat

import pytest

from foodquick.config import TOO_FAR_MESSAGE
from foodquick.errors import InvoiceWriteError
from foodquick.io import InvoiceWriter, render_invoice
from foodquick.models import Customer, DriverRecord, Meal


EXPECTED_ACCEPTED = """\
Order number: 1001
Customer: Jane Doe
Email: jane@example.com
Phone number: 0821234567
Location: CapeTown

You have ordered the following from Mama's Kitchen in CapeTown:

2 x Burger (R50.00)

1 x Fries (R20.00)

Special instructions: Extra sauce

Total: R120.00

Bob is nearest to the restaurant and so they will be delivering your order to you at:
12 Long Street

If you need to contact the restaurant, their number is 0215550000.
"""


def test_accepted_invoice_layout(customer, restaurant, meals):
    text = render_invoice(customer, restaurant, meals, "Extra sauce", 120.0,
                          DriverRecord("Bob", "CapeTown", 1))
    assert text == EXPECTED_ACCEPTED


def test_rejected_invoice_has_no_driver_lines(customer, restaurant, meals):
    text = render_invoice(customer, restaurant, meals, "", 120.0, None)
    assert TOO_FAR_MESSAGE in text
    assert "is nearest to the restaurant" not in text
    assert customer.address not in text
    assert text.endswith(
        f"Total: R120.00\n\n{TOO_FAR_MESSAGE}\n"
        "If you need to contact the restaurant, their number is 0215550000.\n"
    )


def test_round_trip(tmp_path, customer, restaurant):
    path = tmp_path / "invoice.txt"
    InvoiceWriter().write_invoice(str(path), customer, restaurant,
                                  [Meal("Pizza", 45, 1)], "", 45,
                                  DriverRecord("Bob", "CapeTown", 1))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Order number: 1001"
    assert lines[1] == "Customer: Jane Doe"
    assert "Total: R45.00" in lines


def test_creates_parent_directories(tmp_path, customer, restaurant, meals):
    path = tmp_path / "nested" / "dir" / "invoice.txt"
    InvoiceWriter().write_invoice(str(path), customer, restaurant, meals, "", 120.0, None)
    assert path.exists()


def test_overwrites_previous_invoice(tmp_path, customer, restaurant, meals):
    path = tmp_path / "invoice.txt"
    path.write_text("old content that is much longer than anything else\n" * 50)
    InvoiceWriter().write_invoice(str(path), customer, restaurant, meals, "", 120.0, None)
    text = path.read_text(encoding="utf-8")
    assert "old content" not in text
    assert text.startswith("Order number: 1001\n")
    assert os.listdir(tmp_path) == ["invoice.txt"]


def test_failed_write_keeps_previous_file(tmp_path, monkeypatch, customer, restaurant, meals):
    path = tmp_path / "invoice.txt"
    path.write_text("previous invoice\n")

    def broken_replace(src, dst):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(os, "replace", broken_replace)
    with pytest.raises(InvoiceWriteError) as excinfo:
        InvoiceWriter().write_invoice(str(path), customer, restaurant, meals, "", 120.0, None)

    assert "Permission denied" in str(excinfo.value)
    assert path.read_text() == "previous invoice\n"
    assert os.listdir(tmp_path) == ["invoice.txt"]


def test_unwritable_target_raises(tmp_path, customer, restaurant, meals):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(InvoiceWriteError):
        InvoiceWriter().write_invoice(str(blocker / "invoice.txt"), customer, restaurant,
                                      meals, "", 120.0, None)


def test_unencodable_text_leaves_no_temp_file(tmp_path, restaurant, meals):
    customer = Customer(5, "J\udcffane", "082", "1 Main Rd", "CapeTown", "j@x.com")
    path = tmp_path / "invoice.txt"
    with pytest.raises(InvoiceWriteError):
        InvoiceWriter().write_invoice(str(path), customer, restaurant, meals, "", 120.0, None)
    assert os.listdir(tmp_path) == []


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_rewrite_keeps_existing_permissions(tmp_path, customer, restaurant, meals):
    path = tmp_path / "invoice.txt"
    path.write_text("previous invoice\n")
    os.chmod(path, 0o644)
    InvoiceWriter().write_invoice(str(path), customer, restaurant, meals, "", 120.0, None)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o644


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_new_invoice_follows_umask(tmp_path, customer, restaurant, meals):
    old_umask = os.umask(0o022)
    try:
        path = tmp_path / "invoice.txt"
        InvoiceWriter().write_invoice(str(path), customer, restaurant, meals, "", 120.0, None)
    finally:
        os.umask(old_umask)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o644


def test_save_message_goes_to_the_given_sink(tmp_path, capsys, customer, restaurant, meals):
    messages = []
    path = tmp_path / "invoice.txt"
    InvoiceWriter(echo=messages.append).write_invoice(str(path), customer, restaurant,
                                                      meals, "", 120.0, None)
    assert capsys.readouterr().out == ""
    assert messages == [f"\n💾 Invoice written to {path}"]
