import pytest
from notefd.accessors.base import Accessor, ReadError
from notefd.models import Header


class CountingAccessor(Accessor):
    def __init__(self, path):
        super().__init__(path)
        self.loads = 0

    def _load(self):
        self.loads += 1

    def _info(self):
        return Header(self.path)


def test_info_loads_once():
    acc = CountingAccessor('foo')
    assert acc.info() == Header('foo')
    assert acc.info() == Header('foo')
    assert acc.loads == 1


def test_read_error_message():
    cause = FileNotFoundError()
    error = ReadError('b.note.txt', cause)
    assert str(error) == 'Failed to read file: b.note.txt'
    assert error.message == 'Failed to read file: b.note.txt'
    assert error.path == 'b.note.txt'
    assert error.cause is cause


def test_unimplemented():
    with pytest.raises(NotImplementedError):
        Accessor('foo').info()
