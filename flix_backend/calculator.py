from __future__ import annotations

from typing import Iterable, Iterator, Sequence

Number = int | float


class DivisionByZeroError(ZeroDivisionError):
    def __init__(self, message: str = "Cannot divide by zero") -> None:
        super().__init__(message)


class Calculator:
    """
    Running-total calculator.

    Every operation mutates `total` in place and returns the new value. A failed
    division leaves `total` untouched.

    Not thread-safe: callers sharing an instance must serialize access.
    """

    def __init__(self, total: Number = 0) -> None:
        self.total: Number = total

    def add(self, number: Number) -> Number:
        self.total += number
        return self.total

    def subtract(self, number: Number) -> Number:
        self.total -= number
        return self.total

    def multiply(self, number: Number) -> Number:
        self.total *= number
        return self.total

    def divide(self, number: Number) -> Number:
        if number == 0:
            raise DivisionByZeroError()
        self.total /= number
        return self.total

    def reset(self) -> Number:
        self.total = 0
        return self.total

    def __repr__(self) -> str:
        return f"Calculator(total={self.total!r})"


OPERATIONS: tuple[str, ...] = ("add", "subtract", "multiply", "divide")


def _normalize_op(op_name: str) -> str:
    name = str(op_name or "").strip().lower()
    if name not in OPERATIONS:
        raise ValueError(f"Unknown calculator operation: {op_name!r}")
    return name


def iter_operations(calculator: Calculator, operations: Iterable[tuple[str, Number]]) -> Iterator[Number]:
    """
    Apply `(op_name, operand)` pairs in order, yielding the total after each one.

    Stops at the first failing operation; totals reached before it stay on the calculator.
    """

    for op_name, operand in operations:
        yield getattr(calculator, _normalize_op(op_name))(operand)


def apply_operations(calculator: Calculator, operations: Iterable[tuple[str, Number]]) -> list[Number]:
    return list(iter_operations(calculator, operations))


def parse_number(value: str) -> Number:
    raw = str(value).strip()
    if not raw:
        raise ValueError("Operand is empty.")
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        parsed = float(raw)
    except ValueError as exc:
        raise ValueError(f"Unable to parse operand: {value!r}") from exc
    if parsed != parsed or parsed in (float("inf"), float("-inf")):
        raise ValueError(f"Operand must be finite: {value!r}")
    return parsed


def pair_operations(tokens: Sequence[str]) -> list[tuple[str, Number]]:
    # Flat CLI form: add 5 multiply 3 ...
    if len(tokens) % 2:
        raise ValueError("Operations must be given as <op> <number> pairs.")
    return [(_normalize_op(tokens[i]), parse_number(tokens[i + 1])) for i in range(0, len(tokens), 2)]
