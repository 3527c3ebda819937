"""Valid Brazilian CPF and CNPJ numbers for sample data."""

from __future__ import annotations

import random


def _check_digit(digits: list[int], weights: list[int]) -> int:
    total = sum(d * w for d, w in zip(digits, weights))
    remainder = 11 - (total % 11)
    return 0 if remainder >= 10 else remainder


def generate_cpf(rng: random.Random | None = None) -> str:
    """Generate a valid CPF (11 digits, unformatted)."""
    rng = rng or random.Random()
    digits = [rng.randint(0, 9) for _ in range(9)]
    digits.append(_check_digit(digits, list(range(10, 1, -1))))
    digits.append(_check_digit(digits, list(range(11, 1, -1))))
    return "".join(str(d) for d in digits)


def generate_cnpj(rng: random.Random | None = None) -> str:
    """Generate a valid CNPJ (14 digits, unformatted, head office 0001)."""
    rng = rng or random.Random()
    digits = [rng.randint(0, 9) for _ in range(8)] + [0, 0, 0, 1]
    digits.append(_check_digit(digits, [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]))
    digits.append(_check_digit(digits, [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]))
    return "".join(str(d) for d in digits)

