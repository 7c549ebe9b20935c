"""Two threads incrementing a shared counter, with and without a mutex."""

from __future__ import annotations

import sys
import threading

_USAGE = "usage: threadlab-counter [--sync] <niters>"


class _Counter:
    def __init__(self) -> None:
        self.value = 0
        self.lock = threading.Lock()


def _racy_loop(counter: _Counter, niters: int) -> None:
    for _ in range(niters):
        current = counter.value
        counter.value = current + 1


def _locked_loop(counter: _Counter, niters: int) -> None:
    for _ in range(niters):
        with counter.lock:
            counter.value += 1


def run_counter(niters: int, synchronized: bool = False) -> int:
    """Run two threads that each add 1 to a shared counter ``niters`` times.

    Without synchronisation updates may be lost; with it the result is
    always ``2 * niters`` (or 0 when ``niters`` is not positive).
    """
    counter = _Counter()
    loop = _locked_loop if synchronized else _racy_loop
    threads = [threading.Thread(target=loop, args=(counter, niters)) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return counter.value


def format_result(cnt: int, niters: int) -> str:
    """Report whether ``cnt`` equals the expected ``2 * niters``."""
    if cnt != 2 * niters:
        return f"BOOM! cnt={cnt}"
    return f"OK cnt={cnt}"


def _atoi(text: str) -> int:
    """Parse a leading decimal integer the lenient way, yielding 0 on garbage."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``[--sync] <niters>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    synchronized = False
    if args and args[0] == "--sync":
        synchronized = True
        args = args[1:]
    if len(args) != 1:
        print(_USAGE)
        return 0
    niters = _atoi(args[0])
    cnt = run_counter(niters, synchronized)
    print(format_result(cnt, niters))
    return 0


if __name__ == "__main__":
    sys.exit(main())