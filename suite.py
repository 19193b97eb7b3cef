import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """an assert_that failure, reported apart from unexpected errors."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# pytest collects the registered functions, never the decorator itself
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


@contextmanager
def raises(expected: Type[BaseException], message: str = "") -> Iterator[Dict[str, Any]]:
    """assert that the block raises `expected`; the caught error is stored under 'error'."""
    caught: Dict[str, Any] = {'error': None}
    try:
        yield caught
    except expected as e:
        caught['error'] = e
        return
    raise SuiteAssertionError(message or f"expected {expected.__name__} to be raised")


def run(title: str = "test run") -> None:
    """executes all registered tests and prints a report."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()
    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None
        try:
            test_item['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        passed = error is None
        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})
        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _print_summary(start_time)
    # registered tests are cleared so one script can hold several runs
    _suite_state['tests'] = []


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']
    failed_count = sum(1 for r in results if not r['passed'])
    color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(results) - failed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{color}---------------{_c.reset}\n")
