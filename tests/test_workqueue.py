import threading

import pytest

from stlkit.workqueue import PollingPool, Singleton, ThreadSafeQueue


def test_queue_is_fifo():
    queue = ThreadSafeQueue()
    for item in ("a", "b", "c"):
        queue.push(item)
    assert [queue.try_pop(), queue.try_pop(), queue.try_pop()] == ["a", "b", "c"]
    assert queue.empty()


def test_try_pop_on_empty_returns_none():
    queue = ThreadSafeQueue()
    assert queue.try_pop() is None
    assert queue.empty()


def test_empty_reflects_contents():
    queue = ThreadSafeQueue()
    queue.push(1)
    assert not queue.empty()
    queue.wait_and_pop()
    assert queue.empty()


def test_wait_and_pop_waits_for_push():
    queue = ThreadSafeQueue()
    received: list[int] = []
    waiter = threading.Thread(target=lambda: received.append(queue.wait_and_pop()), daemon=True)
    waiter.start()
    waiter.join(timeout=0.1)
    assert waiter.is_alive()
    queue.push(42)
    waiter.join(timeout=2)
    assert received == [42]


def test_polling_pool_runs_all_tasks():
    results: list[int] = []
    lock = threading.Lock()
    finished = threading.Semaphore(0)

    def make_task(n):
        def task():
            with lock:
                results.append(n)
            finished.release()

        return task

    with PollingPool(3) as pool:
        for n in range(10):
            pool.submit(make_task(n))
        for _ in range(10):
            assert finished.acquire(timeout=5)
    assert sorted(results) == list(range(10))
    with pytest.raises(RuntimeError):
        pool.submit(make_task(99))
    assert 99 not in results


def test_polling_pool_survives_failing_task():
    ran = threading.Event()
    with PollingPool(1) as pool:
        pool.submit(lambda: 1 // 0)
        pool.submit(ran.set)
        assert ran.wait(timeout=5)


def test_polling_pool_rejects_after_close():
    pool = PollingPool(1)
    pool.close()
    with pytest.raises(RuntimeError):
        pool.submit(lambda: None)


def test_polling_pool_rejects_zero_threads():
    with pytest.raises(ValueError):
        PollingPool(0)


def test_singleton_first_value_wins_across_threads():
    seen: list = []
    lock = threading.Lock()

    def grab(value):
        instance = Singleton.get_instance(value)
        with lock:
            seen.append(instance)

    threads = [threading.Thread(target=grab, args=(v,)) for v in ("first", "second", "third")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(seen) == 3
    assert len({id(instance) for instance in seen}) == 1
    later = Singleton.get_instance("later")
    assert later is seen[0]
    assert later.value == seen[0].value


def test_singleton_ignores_later_values():
    class Settings(Singleton):
        pass

    first = Settings.get_instance("first")
    second = Settings.get_instance("second")
    assert second is first
    assert second.value == "first"
    base_first = Singleton.get_instance("alpha")
    base_second = Singleton.get_instance("beta")
    assert base_second is base_first
    assert base_second.value == base_first.value
    assert base_first is not first


def test_singleton_separate_per_subclass():
    class One(Singleton):
        pass

    class Two(Singleton):
        pass

    base = Singleton.get_instance("base")
    one = One.get_instance("first")
    two = Two.get_instance("second")
    assert one is not two
    assert one is not base and two is not base
    assert (one.value, two.value) == ("first", "second")
    assert isinstance(two, Two)
    assert Singleton.get_instance("other") is base