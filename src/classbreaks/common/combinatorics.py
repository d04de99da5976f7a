"""
Module: common.combinatorics

Purpose:
    Exact binomial coefficients for sizing the Jenks candidate set.

Key Functions:
    - choose(n, r): Stepwise n-choose-r without factorial intermediates
    - naive_choose(n, r): Factorial-ratio reference implementation
    - factorial(n): Product 1..n

Dependencies:
    - math (std)

Used By:
    - jenks.generator: Pre-sizing the partition list
"""

from __future__ import annotations

import math


def factorial(n: int) -> int:
    """Return n! (1 for n <= 1)."""
    return math.prod(range(1, n + 1))


def naive_choose(n: int, r: int) -> int:
    """
    Compute n-choose-r as a ratio of factorials.

    Reference baseline only. The intermediates grow like n!, so this
    gets slow and memory hungry long before the result itself is large.
    Use choose() everywhere else.

    Args:
        n: Set size
        r: Subset size (0 <= r <= n)

    Returns:
        Number of size-r subsets
    """
    return factorial(n) // (factorial(r) * factorial(n - r))


def choose(n: int, r: int) -> int:
    """
    Compute n-choose-r without factorial intermediates.

    Walks one row of Pascal's triangle: after step i the running value
    is choose(n - r + i, i), so the division by i is always exact and
    intermediates stay close to the size of the result.

    Args:
        n: Set size
        r: Subset size

    Returns:
        Number of size-r subsets of an n-element set

    Note:
        Requires n >= r >= 0. Other inputs are not checked and give
        meaningless results.

    Example:
        >>> choose(25, 3)
        2300
    """
    if r > n - r:
        # choose(n, r) == choose(n, n - r)
        r = n - r
    ans = 1
    for i in range(1, r + 1):
        ans *= n - r + i
        ans //= i
    return ans
