# tests/infrastructure/test_hit_counter.py

from concurrent.futures import ThreadPoolExecutor

from infrastructure.metrics import HitCounter


def test_new_counter_starts_at_zero():
    assert HitCounter().load() == 0


def test_concurrent_increments_are_not_lost():
    counter = HitCounter()
    n = 5000
    with ThreadPoolExecutor(max_workers=16) as pool:
        for _ in range(n):
            pool.submit(counter.increment)
    assert counter.load() == n


def test_reset_returns_previous_and_zeroes():
    counter = HitCounter()
    for _ in range(3):
        counter.increment()
    assert counter.reset() == 3
    assert counter.load() == 0
    # already zero
    assert counter.reset() == 0
    assert counter.load() == 0


def test_counters_are_independent():
    a, b = HitCounter(), HitCounter()
    a.increment()
    assert a.load() == 1
    assert b.load() == 0
