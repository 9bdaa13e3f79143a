import pytest

from dsakit.containers import DynamicArray, Product, Student


def test_product_fields():
    product = Product("Phone", 12099, 10)
    assert product.name == "Phone"
    assert product.price == 12099
    assert product.quantity == 10


def test_student_fields():
    student = Student(name="RahulKumar", roll_no=58, cgpa=7.8)
    assert student.name == "RahulKumar"
    assert student.roll_no == 58
    assert student == Student("RahulKumar", 58, 7.8)


def test_new_array_is_empty():
    array = DynamicArray()
    assert len(array) == 0
    assert array.capacity == 1


def test_add_grows_and_keeps_values():
    array = DynamicArray()
    for i in range(5):
        array.add(i)
    assert len(array) == 5
    assert array.capacity == 8
    assert [array.get(i) for i in range(5)] == list(range(5))


def test_capacity_is_power_of_two_at_least_size():
    array = DynamicArray()
    for i in range(37):
        array.add(i)
        capacity = array.capacity
        assert capacity >= len(array)
        assert capacity & (capacity - 1) == 0


def test_remove_returns_last_and_keeps_capacity():
    array = DynamicArray()
    for i in range(5):
        array.add(i)
    before = array.capacity
    assert array.remove() == 4
    assert len(array) == 4
    assert array.capacity == before
    assert array.get(2) == 2


def test_remove_from_empty():
    with pytest.raises(IndexError):
        DynamicArray().remove()


def test_get_out_of_range():
    array = DynamicArray()
    with pytest.raises(IndexError):
        array.get(0)
    array.add(7)
    with pytest.raises(IndexError):
        array.get(1)
    with pytest.raises(IndexError):
        array.get(-1)