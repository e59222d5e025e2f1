from __future__ import annotations

import itertools
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from pathcodec import TimestampGenerator, default_generator, get_timestamp
from pathcodec.timestamp import current_millis


def _fake_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_new_generator_has_sentinel() -> None:
    assert TimestampGenerator().last_issued == -1


def test_spins_until_clock_advances() -> None:
    generator = TimestampGenerator(clock=_fake_clock([5, 5, 5, 6]))
    assert generator.next() == 5
    assert generator.next() == 6
    assert generator.last_issued == 6


def test_call_is_next() -> None:
    generator = TimestampGenerator(clock=_fake_clock([1, 2]))
    assert generator() == 1
    assert generator() == 2


def test_clock_going_backwards_stays_unique(caplog) -> None:
    generator = TimestampGenerator(clock=_fake_clock([10, 8, 9, 20]))
    with caplog.at_level(logging.WARNING, logger="pathcodec.timestamp"):
        values = [generator.next() for _ in range(4)]
    assert values == [10, 11, 12, 20]
    assert "Clock went backwards" in caplog.text


def test_real_clock_is_close_to_wall_time() -> None:
    generator = TimestampGenerator()
    before = current_millis()
    value = generator.next()
    after = current_millis()
    assert before <= value <= after + 1


def test_sequential_values_strictly_increase() -> None:
    generator = TimestampGenerator()
    values = [generator.next() for _ in range(20)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_unique_under_concurrency_with_slow_clock() -> None:
    counter = itertools.count()
    # Advances only every third read, forcing callers to spin
    generator = TimestampGenerator(clock=lambda: next(counter) // 3)
    threads, per_thread = 8, 250

    def worker() -> list[int]:
        return [generator.next() for _ in range(per_thread)]

    with ThreadPoolExecutor(max_workers=threads) as pool:
        results = [f.result() for f in [pool.submit(worker) for _ in range(threads)]]

    all_values = [v for values in results for v in values]
    assert len(all_values) == threads * per_thread
    assert len(set(all_values)) == len(all_values)
    for values in results:
        assert all(a < b for a, b in zip(values, values[1:]))
    assert generator.last_issued == max(all_values)


def test_unique_under_concurrency_with_wall_clock() -> None:
    generator = TimestampGenerator()
    results: list[list[int]] = []
    lock = threading.Lock()

    def worker() -> None:
        values = [generator.next() for _ in range(10)]
        with lock:
            results.append(values)

    workers = [threading.Thread(target=worker) for _ in range(4)]
    for t in workers:
        t.start()
    for t in workers:
        t.join()

    all_values = [v for values in results for v in values]
    assert len(all_values) == 40
    assert len(set(all_values)) == 40
    assert generator.last_issued == max(all_values)


def test_default_generator_is_shared() -> None:
    assert default_generator() is default_generator()
    first = get_timestamp()
    second = get_timestamp()
    assert second > first
    assert default_generator().last_issued == second


def test_values_follow_real_time_order_across_threads() -> None:
    counter = itertools.count()
    generator = TimestampGenerator(clock=lambda: next(counter) // 2)
    calls: list[tuple[int, int, int]] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            started = time.perf_counter_ns()
            value = generator.next()
            finished = time.perf_counter_ns()
            with lock:
                calls.append((started, finished, value))

    with ThreadPoolExecutor(max_workers=6) as pool:
        for future in [pool.submit(worker) for _ in range(6)]:
            future.result()

    assert len({value for _, _, value in calls}) == len(calls) == 300
    # A call that finished before another one started got the smaller value
    by_start = sorted(calls)
    for i, (_, finished, value) in enumerate(by_start):
        for started, _, later in by_start[i + 1:]:
            if finished < started:
                assert value < later
