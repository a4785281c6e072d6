from foodquick.utils import format_amount, same_city, ensure_directory


def test_format_amount_rounds_to_two_decimals():
    assert format_amount(45) == "R45.00"
    assert format_amount(120.0) == "R120.00"
    assert format_amount(0.1 + 0.2) == "R0.30"
    assert format_amount(3, symbol="$") == "$3.00"


def test_same_city_ignores_case_and_padding():
    assert same_city("CapeTown", "capetown")
    assert same_city(" Durban ", "DURBAN")
    assert not same_city("Cape Town", "CapeTown")


def test_ensure_directory_is_idempotent(tmp_path):
    target = tmp_path / "a" / "b"
    ensure_directory(str(target))
    ensure_directory(str(target))
    assert target.is_dir()
