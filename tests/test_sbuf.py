import threading

import pytest

from threadlab.sbuf import SharedBuffer


def test_items_come_out_in_insertion_order():
    buf = SharedBuffer(4)
    for item in ["a", "b", "c"]:
        buf.insert(item)
    assert [buf.remove() for _ in range(3)] == ["a", "b", "c"]


def test_wraps_around_many_times():
    buf = SharedBuffer(3)
    out = []
    for round_start in range(0, 30, 3):
        for item in range(round_start, round_start + 3):
            buf.insert(item)
        out.extend(buf.remove() for _ in range(3))
    assert out == list(range(30))


def test_len_tracks_contents():
    buf = SharedBuffer(2)
    assert len(buf) == 0
    buf.insert(1)
    buf.insert(2)
    assert len(buf) == 2
    buf.remove()
    assert len(buf) == 1


@pytest.mark.parametrize("n", [0, -1])
def test_rejects_non_positive_size(n):
    with pytest.raises(ValueError):
        SharedBuffer(n)


def test_insert_blocks_when_full():
    buf = SharedBuffer(1)
    buf.insert("first")
    worker = threading.Thread(target=buf.insert, args=("second",), daemon=True)
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    assert buf.remove() == "first"
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert buf.remove() == "second"


def test_remove_blocks_when_empty():
    buf = SharedBuffer(2)
    result = []
    worker = threading.Thread(target=lambda: result.append(buf.remove()), daemon=True)
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    assert result == []
    buf.insert(42)
    worker.join(timeout=5)
    assert result == [42]


def test_producer_consumer_preserves_order():
    buf = SharedBuffer(5)
    count = 500
    received = []

    def produce():
        for item in range(count):
            buf.insert(item)

    def consume():
        for _ in range(count):
            received.append(buf.remove())

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert received == list(range(count))
    assert len(buf) == 0