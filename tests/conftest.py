import pytest

from autoseq import AutoSequence


@pytest.fixture
def fib():
    return AutoSequence(lambda a: a[a.n() - 1] + a[a.n() - 2], 0, 1)


@pytest.fixture
def total(fib):
    """Running sums of `fib`, seeded with s[0] = 0."""
    return AutoSequence(lambda a: a[a.n() - 1] + fib[a.n()], 0)


class CountingFormula:
    """Raw formula a[n] = n * n that records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, n, history):
        self.calls.append(n)
        return n * n


@pytest.fixture
def counting():
    return CountingFormula()
