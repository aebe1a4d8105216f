import dataclasses

import pytest

from drillwatch.drills.structs import (
    ColorClassic,
    ColorTuple,
    Package,
    UnitLike,
    Wrapper,
    array_and_vec,
    create_order_template,
    vec_loop,
    vec_map,
)


def test_classic_c_structs():
    green = ColorClassic(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTuple(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    unit_like = UnitLike()
    assert f"{unit_like!r}s are fun!" == "UnitLikes are fun!"


def test_your_order():
    template = create_order_template()
    order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert order.name == "Hacker in Rust"
    assert order.year == template.year
    assert order.made_by_phone == template.made_by_phone
    assert order.made_by_mobile == template.made_by_mobile
    assert order.made_by_email == template.made_by_email
    assert order.item_number == template.item_number
    assert order.count == 1


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="weightless"):
        Package("Spain", "Austria", -2210)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_array_and_vec_similarity():
    array, vector = array_and_vec()
    assert list(array) == vector


def _evens():
    return [2, 4, 6, 8, 10]


def test_vec_loop():
    values = _evens()
    answer = vec_loop(values)
    assert answer == [4, 8, 12, 16, 20]
    assert answer is values


def test_vec_map():
    values = _evens()
    answer = vec_map(values)
    assert answer == [4, 8, 12, 16, 20]
    assert values == _evens()