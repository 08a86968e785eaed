"""
a small test harness for the sequery suites.

test modules register cases with @test("description") and check with
assert_that / assert_raises. a module run as a script calls run(); pytest
collects the same functions directly.
"""
import time
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, List, Optional, Type


class TestAssertionError(AssertionError):
    """raised by assert_that so failures can be told apart from crashes."""
    __test__ = False


@dataclass
class CaseResult:
    description: str
    passed: bool
    elapsed_ms: float
    error: Optional[str] = None


@dataclass
class _Registry:
    cases: List[tuple] = field(default_factory=list)
    results: List[CaseResult] = field(default_factory=list)


_registry = _Registry()

_GREEN, _RED, _BLUE, _GREY, _RESET = '\033[92m', '\033[91m', '\033[94m', '\033[90m', '\033[0m'


def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registry.cases.append((description, func))

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  contains: Optional[str] = None) -> BaseException:
    """call func and require it to raise error_type, optionally with a message fragment."""
    try:
        func()
    except error_type as e:
        if contains is not None and contains not in str(e):
            raise TestAssertionError(f"expected '{contains}' in error message, got: {e}")
        return e
    raise TestAssertionError(f"expected {error_type.__name__} to be raised")


def _run_case(description: str, func: Callable) -> CaseResult:
    started = time.perf_counter()
    error = None
    try:
        func()
    except TestAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
    elapsed = (time.perf_counter() - started) * 1000
    return CaseResult(description, error is None, elapsed, error)


def run(title: str = "test run") -> bool:
    """run every registered case, print a report and return whether all passed."""
    print(f"\n{_BLUE}== {title} =={_RESET}")
    _registry.results = [_run_case(description, func) for description, func in _registry.cases]

    for result in _registry.results:
        mark = f"{_GREEN}pass{_RESET}" if result.passed else f"{_RED}FAIL{_RESET}"
        print(f"  [{mark}] {result.description} {_GREY}({result.elapsed_ms:.1f}ms){_RESET}")
        if result.error:
            print(f"         {_GREY}{result.error}{_RESET}")

    failed = [r for r in _registry.results if not r.passed]
    total_ms = sum(r.elapsed_ms for r in _registry.results)
    colour = _RED if failed else _GREEN
    print(f"{colour}{len(_registry.results) - len(failed)} passed, {len(failed)} failed "
          f"in {total_ms:.1f}ms{_RESET}\n")

    # a script may register and run several batches
    _registry.cases = []
    return not failed
