import threading

from app.utils.helpers import positive_ids, split_ids
from app.utils.locks import KeyedLock


def test_positive_ids_filters_non_positive_and_garbage():
    assert positive_ids([0, -1, 5]) == [5]
    assert positive_ids(["3", " 7 ", "x", "", None, 2.0, True]) == [3, 7]
    assert positive_ids(4) == [4]
    assert positive_ids("9") == [9]
    assert positive_ids(None) == []


def test_split_ids():
    assert split_ids("1, 2,,3") == ["1", "2", "3"]
    assert split_ids("") == []
    assert split_ids(None) == []


def test_keyed_lock_releases_entries():
    locks = KeyedLock()
    with locks.hold(("blog", 1)):
        with locks.hold(("blog", 2)):
            assert len(locks) == 2
    assert len(locks) == 0


def test_keyed_lock_serializes_same_key():
    locks = KeyedLock()
    events = []
    entered = threading.Event()
    release = threading.Event()

    def holder():
        with locks.hold("k"):
            entered.set()
            release.wait(timeout=5)
            events.append("first")

    def waiter():
        entered.wait(timeout=5)
        with locks.hold("k"):
            events.append("second")

    t1 = threading.Thread(target=holder)
    t2 = threading.Thread(target=waiter)
    t1.start()
    t2.start()
    entered.wait(timeout=5)
    t2.join(timeout=0.2)
    assert events == []
    release.set()
    t1.join(timeout=5)
    t2.join(timeout=5)
    assert events == ["first", "second"]
