"""Threads that greet by id: racy and safe argument passing, mutex and semaphore."""

from __future__ import annotations

import argparse
import sys
import threading
import time


def _greet(myid: int, seen: list[int]) -> None:
    print(f"Hello from thread {myid}", flush=True)
    seen.append(myid)


def greet_racy(nthreads: int = 4) -> list[int]:
    """Start threads that all read their id from one shared, changing cell.

    A thread may read the cell after the loop has already advanced it, so ids
    can repeat and can equal ``nthreads``. Returns the ids in print order.
    """
    shared = [0]
    seen: list[int] = []

    def routine() -> None:
        _greet(shared[0], seen)

    threads = []
    for i in range(nthreads):
        shared[0] = i
        thread = threading.Thread(target=routine)
        thread.start()
        threads.append(thread)
    shared[0] = nthreads
    for thread in threads:
        thread.join()
    return seen


def greet_with_ids(nthreads: int = 4) -> list[int]:
    """Start threads that each get their own id. Returns ids in print order."""
    seen: list[int] = []
    threads = [threading.Thread(target=_greet, args=(i, seen)) for i in range(nthreads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return seen


def _run_guarded(nthreads: int, guard, delay: float) -> list[int]:
    seen: list[int] = []

    def routine(myid: int) -> None:
        with guard:
            time.sleep(delay)
            _greet(myid, seen)

    threads = [threading.Thread(target=routine, args=(i,)) for i in range(nthreads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return seen


def greet_with_mutex(nthreads: int = 4, delay: float = 1.0) -> list[int]:
    """Threads take turns under one mutex, each sleeping ``delay`` seconds."""
    return _run_guarded(nthreads, threading.Lock(), delay)


def greet_with_semaphore(nthreads: int = 4, permits: int = 2, delay: float = 1.0) -> list[int]:
    """At most ``permits`` threads sleep and greet at the same time."""
    if permits < 1:
        raise ValueError("a semaphore needs at least one permit")
    return _run_guarded(nthreads, threading.Semaphore(permits), delay)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: run one of the greeting demonstrations."""
    parser = argparse.ArgumentParser(prog="threadlab-greet")
    parser.add_argument(
        "variant",
        nargs="?",
        default="ids",
        choices=["racy", "ids", "mutex", "semaphore"],
    )
    parser.add_argument("--threads", type=int, default=4)
    parser.add_argument("--permits", type=int, default=2)
    parser.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)
    if args.variant == "racy":
        greet_racy(args.threads)
    elif args.variant == "ids":
        greet_with_ids(args.threads)
    elif args.variant == "mutex":
        greet_with_mutex(args.threads, args.delay)
    else:
        greet_with_semaphore(args.threads, args.permits, args.delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())