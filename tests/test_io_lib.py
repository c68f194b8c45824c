import pytest

from yasl import io_lib
from yasl.errors import YaslTypeError, YaslValueError
from yasl.state import State
from yasl.values import UserData


@pytest.fixture
def state():
    s = State()
    s.err.to_string()
    io_lib.declare(s)
    return s


def io_table(state):
    state.load_global("io")
    return state.pop()


def method(state, name):
    return state.metatables[io_lib.FILE_NAME][name]


def call(state, fn, *args):
    state.push(fn)
    for arg in args:
        state.push(arg)
    count = state.function_call(len(args))
    return state.pop() if count else None


def open_file(state, path, mode=None):
    return call(state, io_table(state)["open"], str(path), mode)


def test_open_returns_tagged_userdata(state, tmp_path):
    f = open_file(state, tmp_path / "a.txt", "w")
    assert isinstance(f, UserData)
    assert f.tag == io_lib.FILE_NAME
    assert f.mt is state.metatables[io_lib.FILE_NAME]
    assert call(state, method(state, "close"), f) is True


def test_write_then_read_round_trip(state, tmp_path):
    path = tmp_path / "data.txt"
    text = "hello\nworld"
    f = open_file(state, path, "w")
    assert call(state, method(state, "write"), f, text) == len(text)
    assert call(state, method(state, "close"), f) is True
    assert path.read_text() == text

    f = open_file(state, path)
    read = method(state, "read")
    assert call(state, read, f) == "hello"
    assert call(state, read, f) == "world"
    assert call(state, read, f, "a") == text
    call(state, method(state, "close"), f)


def test_append_mode(state, tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("one")
    f = open_file(state, path, "a")
    call(state, method(state, "write"), f, "two")
    call(state, method(state, "close"), f)
    assert path.read_text() == "onetwo"


def test_open_missing_file_gives_undef(state, tmp_path):
    assert open_file(state, tmp_path / "missing.txt", "r") is None


def test_open_invalid_modes(state, tmp_path):
    with pytest.raises(YaslValueError):
        open_file(state, tmp_path / "x", "rw")
    with pytest.raises(YaslValueError) as excinfo:
        open_file(state, tmp_path / "x", "x")
    assert excinfo.value.message == "ValueError: io.open was passed invalid mode: x."
    with pytest.raises(YaslValueError):
        open_file(state, tmp_path / "x", "")


def test_open_type_errors(state, tmp_path):
    with pytest.raises(YaslTypeError):
        call(state, io_table(state)["open"], str(tmp_path / "x"), 5)
    with pytest.raises(YaslTypeError) as excinfo:
        call(state, io_table(state)["open"], 5, "r")
    assert "position 0" in excinfo.value.message


def test_read_invalid_modes(state, tmp_path):
    path = tmp_path / "r.txt"
    path.write_text("abc")
    f = open_file(state, path)
    with pytest.raises(YaslValueError):
        call(state, method(state, "read"), f, "ab")
    with pytest.raises(YaslValueError):
        call(state, method(state, "read"), f, "z")
    with pytest.raises(YaslTypeError):
        call(state, method(state, "read"), f, 3)
    f.data.close()


def test_read_requires_file(state):
    with pytest.raises(YaslTypeError):
        call(state, method(state, "read"), "not a file", "l")


def test_write_type_errors(state, tmp_path):
    f = open_file(state, tmp_path / "w.txt", "w")
    with pytest.raises(YaslTypeError):
        call(state, method(state, "write"), f, 12)
    with pytest.raises(YaslTypeError):
        call(state, method(state, "write"), "nope", "text")
    f.data.close()


def test_seek_then_read_line(state, tmp_path):
    path = tmp_path / "s.txt"
    path.write_text("abcdef")
    f = open_file(state, path)
    assert call(state, method(state, "seek"), f, "set", 2) is True
    assert call(state, method(state, "read"), f) == "cdef"
    assert call(state, method(state, "seek"), f) is True
    assert call(state, method(state, "read"), f) == "abcdef"
    f.data.close()


def test_seek_errors(state, tmp_path):
    path = tmp_path / "s.txt"
    path.write_text("abc")
    f = open_file(state, path)
    with pytest.raises(YaslValueError):
        call(state, method(state, "seek"), f, "bad", 0)
    with pytest.raises(YaslTypeError):
        call(state, method(state, "seek"), f, "set", "x")
    assert call(state, method(state, "seek"), f, "set", -5) is False
    f.data.close()


def test_flush(state, tmp_path):
    f = open_file(state, tmp_path / "f.txt", "w+")
    call(state, method(state, "write"), f, "abc")
    assert call(state, method(state, "flush"), f) is True
    call(state, method(state, "close"), f)


def test_standard_streams(state):
    table = io_table(state)
    for name in ("stdin", "stdout", "stderr"):
        assert table[name].tag == io_lib.FILE_NAME
        assert table[name].mt is state.metatables[io_lib.FILE_NAME]


def test_write_to_stdout(capsys):
    s = State()
    io_lib.declare(s)
    stdout = io_table(s)["stdout"]
    assert call(s, method(s, "write"), stdout, "hi") == 2
    assert capsys.readouterr().out == "hi"