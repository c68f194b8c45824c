import pytest

from yasl.stack import Stack
from yasl.values import Table, YaslType


def test_push_pop_round_trip():
    s = Stack()
    for value in (None, True, 3, 1.5, "s"):
        s.push(value)
    assert [s.pop() for _ in range(5)] == ["s", 1.5, 3, True, None]
    assert len(s) == 0


def test_empty_stack_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.peek()
    with pytest.raises(IndexError):
        s.dup_top()


def test_dup_top():
    s = Stack()
    t = Table()
    s.push(t)
    s.dup_top()
    assert len(s) == 2
    assert s.pop() is s.peek()


def test_peek_at_uses_frame_pointer():
    s = Stack()
    for value in ("fn", "a", "b"):
        s.push(value)
    s.fp = 0
    assert s.peek_at(0) == "a"
    assert s.peek_at(1) == "b"
    with pytest.raises(IndexError):
        s.peek_at(2)
    assert s.typename_at(0) == "str"


def test_is_a_top_and_position():
    s = Stack()
    s.push(1)
    s.push(2.0)
    assert s.is_a(YaslType.FLOAT)
    assert s.is_a(YaslType.INT, 0)
    assert not s.is_a(YaslType.INT)


def test_typename_of_top():
    s = Stack()
    s.push(7)
    assert s.typename() == "int"


def test_pop_int_wrong_type_leaves_stack():
    s = Stack()
    s.push("x")
    assert s.pop_int() == 0
    assert s.pop_float() == 0.0
    assert s.pop_bool() is False
    assert s.peek() == "x"
    assert s.sp == 0


def test_typed_pops():
    s = Stack()
    s.push(True)
    s.push(2.5)
    s.push(4)
    assert s.pop_int() == 4
    assert s.pop_float() == 2.5
    assert s.pop_bool() is True
    assert s.sp == -1


def test_int_pop_does_not_take_bool():
    s = Stack()
    s.push(True)
    assert s.pop_int() == 0
    assert s.peek() is True


def test_str_peek_and_pop():
    s = Stack()
    s.push(5)
    s.push("hello")
    assert s.peek_str() == "hello"
    assert s.pop_str() == "hello"
    assert s.peek_str() is None
    assert s.pop_str() is None
    assert len(s) == 0