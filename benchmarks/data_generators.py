"""
Test data generators for validation benchmarks.

Every generated document has an object or array at the root and stays within
the default nesting limit, so jsoncheck and the reference decoders accept the
same inputs.
"""

import json
import random
import string
from typing import Any

from jsoncheck import MAX_DEPTH

_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]

# Seeded so runs compare like with like
_rng = random.Random(1729)


def generate_test_data(data_type: str) -> str:
    """Generates a JSON document of the requested shape."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "deep_nesting": _generate_deep_nesting,
        "string_heavy": _generate_string_heavy,
        "number_heavy": _generate_number_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def generate_invalid_data(data_type: str) -> str:
    """Generates a large document that fails near its end."""
    valid = generate_test_data(data_type)
    # Drop the closing bracket so the failure surfaces as end of input
    return valid[:-1]


def _generate_small_object() -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": None},
    }
    return json.dumps(data)


def _generate_large_object() -> str:
    """Generates a large JSON object (> 10KB) of records."""
    data = {
        "account": {
            "owner": _random_string(12),
            "region": _rng.choice(["eu", "us", "apac"]),
            "flags": {"verified": True, "locked": False},
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(_rng.uniform(1.0, 1000.0), 2),
                "currency": _rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "memo": f"Payment for {_random_string(20)}",
                "settled": _rng.choice([True, False, None]),
            }
            for i in range(80)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a large array with mixed value types."""
    array: list[Any] = []
    for i in range(300):
        array.append(
            _rng.choice(
                [
                    _rng.randint(-1000, 1000),
                    round(_rng.uniform(-100.0, 100.0), 3),
                    _random_string(_rng.randint(5, 30)),
                    _rng.choice([True, False]),
                    None,
                    {"index": i, "tags": [_random_string(4)]},
                ]
            )
        )
    return json.dumps(array)


def _generate_deep_nesting() -> str:
    """Generates containers nested as deep as the default limit allows."""

    def nest(level: int) -> Any:
        if level == 0:
            return _random_string(10)
        if level % 2:
            return [level, nest(level - 1)]
        return {"level": level, "child": nest(level - 1)}

    # Innermost strings sit MAX_DEPTH containers below the root
    return json.dumps([nest(MAX_DEPTH) for _ in range(50)])


def _generate_string_heavy() -> str:
    """Generates JSON with many escape sequences and unicode escapes."""

    def escaped_string() -> str:
        chars = []
        for _ in range(50):
            if _rng.random() < _ESCAPE_PROBABILITY:
                chars.append(_rng.choice(_ESCAPES))
            elif _rng.random() < _ESCAPE_PROBABILITY:
                chars.append(f"\\u{_rng.randint(0x00A0, 0x07FF):04x}")
            else:
                chars.append(
                    _rng.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    items = ", ".join(escaped_string() for _ in range(200))
    return f'{{"strings": [{items}]}}'


def _generate_number_heavy() -> str:
    """Generates arrays of integers, fractions and exponents."""
    numbers = [
        _rng.choice(
            [
                str(_rng.randint(-(10**9), 10**9)),
                f"{_rng.uniform(-1, 1):.6f}",
                f"{_rng.uniform(1, 10):.3f}e{_rng.randint(-30, 30)}",
            ]
        )
        for _ in range(1000)
    ]
    return "[" + ",".join(numbers) + "]"


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(_rng.choices(string.ascii_letters, k=length))
