import pytest

from termgrid.writequeue import WriteQueue


class ChunkWriter:
    """Accepts at most ``limit`` bytes per call."""

    def __init__(self, limit=1024):
        self.limit = limit
        self.data = bytearray()
        self.calls = 0

    def write(self, data):
        self.calls += 1
        taken = data[: self.limit]
        self.data += taken
        return len(taken)


class BudgetWriter:
    """Accepts ``budget`` bytes in total, then behaves as given."""

    def __init__(self, budget, when_full):
        self.budget = budget
        self.when_full = when_full
        self.data = bytearray()

    def write(self, data):
        if self.budget == 0:
            if isinstance(self.when_full, BaseException):
                raise self.when_full
            return self.when_full
        taken = data[: self.budget]
        self.budget -= len(taken)
        self.data += taken
        return len(taken)


def test_empty_queue_needs_no_write():
    queue = WriteQueue()
    assert queue.needs_write() is False
    assert queue.write_to(ChunkWriter()) == 0


def test_push_makes_queue_need_write():
    queue = WriteQueue()
    queue.push(b"abc")
    assert queue.needs_write() is True


def test_all_chunks_written_in_order():
    queue = WriteQueue()
    queue.push(b"hello ")
    queue.push(bytearray(b"wide "))
    queue.push(memoryview(b"world"))
    writer = ChunkWriter()
    assert queue.write_to(writer) == len(b"hello wide world")
    assert bytes(writer.data) == b"hello wide world"
    assert queue.needs_write() is False


def test_partial_writes_continue_until_done():
    queue = WriteQueue()
    queue.push(b"abcdefghij")
    writer = ChunkWriter(limit=3)
    assert queue.write_to(writer) == 10
    assert bytes(writer.data) == b"abcdefghij"
    assert writer.calls == 4


def test_zero_write_keeps_remaining_bytes():
    queue = WriteQueue()
    queue.push(b"abcdef")
    queue.push(b"gh")
    writer = BudgetWriter(4, 0)
    assert queue.write_to(writer) == 4
    assert queue.needs_write() is True

    rest = ChunkWriter()
    queue.write_to(rest)
    assert bytes(writer.data) + bytes(rest.data) == b"abcdefgh"


def test_would_block_stops_and_keeps_data():
    queue = WriteQueue()
    queue.push(b"0123456789")
    writer = BudgetWriter(2, BlockingIOError())
    assert queue.write_to(writer) == 2
    assert queue.needs_write() is True

    rest = ChunkWriter()
    queue.write_to(rest)
    assert bytes(rest.data) == b"23456789"


def test_none_return_is_treated_as_blocked():
    queue = WriteQueue()
    queue.push(b"xyz")
    writer = BudgetWriter(1, None)
    assert queue.write_to(writer) == 1
    rest = ChunkWriter()
    queue.write_to(rest)
    assert bytes(rest.data) == b"yz"


def test_interrupted_stops_without_error():
    queue = WriteQueue()
    queue.push(b"abc")
    writer = BudgetWriter(0, InterruptedError())
    assert queue.write_to(writer) == 0
    assert queue.needs_write() is True


def test_other_errors_propagate_and_keep_data():
    queue = WriteQueue()
    queue.push(b"abcd")
    writer = BudgetWriter(1, BrokenPipeError())
    with pytest.raises(BrokenPipeError):
        queue.write_to(writer)
    assert queue.needs_write() is True
    rest = ChunkWriter()
    queue.write_to(rest)
    assert bytes(rest.data) == b"bcd"


def test_empty_chunks_are_ignored():
    queue = WriteQueue()
    queue.push(b"")
    assert queue.needs_write() is False