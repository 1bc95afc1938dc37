"""Primes, greatest common divisors, binary strings and integer powers."""

from __future__ import annotations

import math


def sieve_of_eratosthenes(n: int) -> list[int]:
    """Return every prime less than or equal to ``n``."""
    if n < 2:
        return []
    is_candidate = [True] * (n + 1)
    is_candidate[0] = is_candidate[1] = False
    p = 2
    while p * p <= n:
        if is_candidate[p]:
            for multiple in range(p * p, n + 1, p):
                is_candidate[multiple] = False
        p += 1
    return [value for value, prime in enumerate(is_candidate) if prime]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(x, y, g)`` with ``a*x + b*y == g`` and ``g`` the gcd."""
    if not b:
        return 1, 0, a
    small_x, small_y, g = extended_gcd(b, a % b)
    return small_y, small_x - (a // b) * small_y, g


def lcm(a: int, b: int) -> int:
    """Least common multiple of ``a`` and ``b``."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("lcm of 0 and 0 is undefined")
    return a // divisor * b


def to_binary(n: int) -> str:
    """Binary digits of ``n``; a value that is not positive gives ''."""
    digits = []
    while n > 0:
        digits.append(str(n % 2))
        n //= 2
    return "".join(reversed(digits))


def from_binary(text: str) -> int:
    """Value of a binary string; every character other than '1' counts as 0."""
    value = 0
    for char in text:
        value = value * 2 + (1 if char == "1" else 0)
    return value


def is_prime(n: int) -> bool:
    """Trial division over 6k +/- 1."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def is_perfect_square(n: int) -> bool:
    """True when ``n`` is the square of an integer."""
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def is_power_of_two(n: int) -> bool:
    """True when ``n`` is a positive power of two (including 1)."""
    return n > 0 and n & (n - 1) == 0


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result