"""
Operation Executors - The math behind /bfhl.

Pure functions with no side effects:
- fibonacci     : first n terms of the sequence
- filter_primes : prime members of a list, in order
- hcf           : GCD folded across a list
- lcm           : LCM folded across a list

execute() maps a validated Operation onto the matching function.
The AI operation is not here; it lives in ai_service because it
performs I/O.
"""
from math import isqrt
from typing import Callable, Dict, List, Union

from src.core.validators import Operation


def fibonacci(n: int) -> List[int]:
    """
    Generate the first n Fibonacci numbers, starting 0, 1.

    Example:
        >>> fibonacci(5)
        [0, 1, 1, 2, 3]
    """
    if n <= 0:
        return []
    if n == 1:
        return [0]

    sequence = [0, 1]
    for _ in range(2, n):
        sequence.append(sequence[-1] + sequence[-2])
    return sequence


def is_prime(num: int) -> bool:
    """Trial division by odd divisors up to the square root."""
    if num < 2:
        return False
    if num == 2:
        return True
    if num % 2 == 0:
        return False

    for divisor in range(3, isqrt(num) + 1, 2):
        if num % divisor == 0:
            return False
    return True


def filter_primes(numbers: List[int]) -> List[int]:
    """Keep the primes, preserving order and duplicates."""
    return [num for num in numbers if is_prime(num)]


def gcd(a: int, b: int) -> int:
    """Euclidean GCD of the absolute values."""
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def hcf(numbers: List[int]) -> int:
    """
    Highest common factor of a list.

    Stops early once the running value reaches 1, since nothing
    can lower it further.
    """
    if not numbers:
        return 0
    if len(numbers) == 1:
        return abs(numbers[0])

    result = numbers[0]
    for num in numbers[1:]:
        result = gcd(result, num)
        if result == 1:
            return 1
    return result


def lcm_pair(a: int, b: int) -> int:
    """LCM of two non-zero integers."""
    return abs(a * b) // gcd(a, b)


def lcm(numbers: List[int]) -> int:
    """Lowest common multiple of a list of non-zero integers."""
    if not numbers:
        return 0
    if len(numbers) == 1:
        return abs(numbers[0])

    result = numbers[0]
    for num in numbers[1:]:
        result = lcm_pair(result, num)
    return result


_EXECUTORS: Dict[Operation, Callable] = {
    Operation.FIBONACCI: fibonacci,
    Operation.PRIME: filter_primes,
    Operation.LCM: lcm,
    Operation.HCF: hcf,
}


def execute(operation: Operation, value: Union[int, List[int]]) -> Union[int, List[int]]:
    """
    Run one of the math operations on an already-validated value.

    Raises:
        KeyError: For Operation.AI, which is handled by AIService
    """
    return _EXECUTORS[operation](value)
