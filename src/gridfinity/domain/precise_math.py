"""Exact decimal arithmetic for millimetre and inch quantities.

Every grid computation routes through :class:`PreciseMath`. Operands are
converted to :class:`~decimal.Decimal` via their shortest string form,
computed in a private decimal context, and handed back as ``float``.
Converting ``22.5`` inches to millimetres therefore yields exactly
``571.5`` rather than the binary approximation, and the same millimetre
value always comes back as the same float. The half-size combiner relies
on that when it compares edges for equality.

Example:
    >>> pm = PreciseMath()
    >>> pm.multiply(16.5, 25.4)
    419.1
    >>> pm.mod(419.1, 42)
    41.1
"""

from __future__ import annotations

import decimal
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal, str]


@dataclass(frozen=True)
class MathConfig:
    """Configuration for a :class:`PreciseMath` instance.

    Attributes:
        precision: Significant digits carried by the decimal context.
        tolerance: Default tolerance for ``approx_equal`` in millimetres.
    """

    precision: int = 64
    tolerance: float = 0.01

    def __post_init__(self) -> None:
        if self.precision < 15:
            raise ValueError("Precision must be at least 15 significant digits")
        if self.tolerance < 0:
            raise ValueError("Tolerance must be non-negative")


class PreciseMath:
    """Decimal-backed arithmetic with a configuration owned by the instance.

    Each instance builds its own :class:`decimal.Context`, so two instances
    with different precisions never interfere with each other or with the
    thread's default decimal context.
    """

    def __init__(self, config: MathConfig | None = None) -> None:
        self.config = config or MathConfig()
        self._context = decimal.Context(
            prec=self.config.precision,
            rounding=decimal.ROUND_HALF_EVEN,
        )

    def _dec(self, value: Number) -> Decimal:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"Cannot use non-finite value: {value}")
            result = Decimal(repr(value))
        else:
            try:
                result = Decimal(str(value))
            except decimal.InvalidOperation:
                raise ValueError(f"Cannot parse decimal value: {value!r}") from None
        if not result.is_finite():
            raise ValueError(f"Cannot use non-finite value: {value}")
        return result

    @staticmethod
    def _out(value: Decimal) -> float:
        return float(value)

    # Arithmetic

    def add(self, a: Number, b: Number) -> float:
        return self._out(self._context.add(self._dec(a), self._dec(b)))

    def subtract(self, a: Number, b: Number) -> float:
        return self._out(self._context.subtract(self._dec(a), self._dec(b)))

    def multiply(self, a: Number, b: Number) -> float:
        return self._out(self._context.multiply(self._dec(a), self._dec(b)))

    def divide(self, a: Number, b: Number) -> float:
        """Divide ``a`` by ``b``.

        Raises:
            ZeroDivisionError: If ``b`` is exactly zero.
        """
        divisor = self._dec(b)
        if divisor.is_zero():
            raise ZeroDivisionError("Division by zero")
        return self._out(self._context.divide(self._dec(a), divisor))

    def mod(self, a: Number, b: Number) -> float:
        """Floored modulo: the result takes the sign of ``b``.

        Raises:
            ZeroDivisionError: If ``b`` is exactly zero.
        """
        divisor = self._dec(b)
        if divisor.is_zero():
            raise ZeroDivisionError("Modulo by zero")
        dividend = self._dec(a)
        quotient = self._context.divide(dividend, divisor).to_integral_value(
            rounding=decimal.ROUND_FLOOR
        )
        remainder = self._context.subtract(
            dividend, self._context.multiply(divisor, quotient)
        )
        return self._out(remainder)

    # Rounding

    def floor(self, value: Number) -> float:
        return self._out(
            self._dec(value).to_integral_value(rounding=decimal.ROUND_FLOOR)
        )

    def ceil(self, value: Number) -> float:
        return self._out(
            self._dec(value).to_integral_value(rounding=decimal.ROUND_CEILING)
        )

    def round(self, value: Number, decimals: int = 2) -> float:
        """Round half away from zero to ``decimals`` places."""
        exponent = Decimal(1).scaleb(-decimals)
        return self._out(
            self._dec(value).quantize(
                exponent, rounding=decimal.ROUND_HALF_UP, context=self._context
            )
        )

    # Comparison

    def equal(self, a: Number, b: Number) -> bool:
        return self._dec(a) == self._dec(b)

    def approx_equal(
        self, a: Number, b: Number, tolerance: Number | None = None
    ) -> bool:
        """Return True when ``|a - b|`` is strictly below ``tolerance``."""
        if tolerance is None:
            tolerance = self.config.tolerance
        diff = abs(self._context.subtract(self._dec(a), self._dec(b)))
        return diff < self._dec(tolerance)

    def is_effectively_zero(self, value: Number, tolerance: Number | None = None) -> bool:
        return self.approx_equal(value, 0, tolerance)

    def less_than(self, a: Number, b: Number) -> bool:
        return self._dec(a) < self._dec(b)

    def less_or_equal(self, a: Number, b: Number) -> bool:
        return self._dec(a) <= self._dec(b)

    def greater_than(self, a: Number, b: Number) -> bool:
        return self._dec(a) > self._dec(b)

    def greater_or_equal(self, a: Number, b: Number) -> bool:
        return self._dec(a) >= self._dec(b)

    def min(self, a: Number, b: Number) -> float:
        return self._out(min(self._dec(a), self._dec(b)))

    def max(self, a: Number, b: Number) -> float:
        return self._out(max(self._dec(a), self._dec(b)))


precise_math = PreciseMath()
