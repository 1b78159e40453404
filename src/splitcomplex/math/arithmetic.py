"""
Split-Complex Arithmetic — алгебра z = a + b·j, j² = +1

Модуль реализует алгебру split-complex чисел:
- Линейные операции: scale, negate, conjugate, add, subtract
- Умножение по правилу j² = +1
- Quadrance (знаконеопределённая квадратичная форма a² - b²)
- Детекцию zero divisors, обратный элемент и частное
- Два нетривиальных идемпотента

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. multiply() прибавляет слагаемое imag·imag к вещественной части (j² = +1).
   Вычитание молча превратило бы алгебру в обычные комплексные числа.
2. quadrance() может быть положительной, отрицательной или нулевой
3. Zero divisor (|quadrance| < eps) → ZeroDivisorError из invert()/divide(),
   до какого-либо деления
4. ±inf и NaN распространяются по правилам float и никогда не являются ошибкой

ФОРМУЛЫ:
    (a + bj)(c + dj) = (ac + bd) + (ad + bc)j
    quad(a + bj)     = (a + bj)(a - bj) = a² - b²
    inv(z)           = conj(z) / quad(z)
    x / y            = x·conj(y) / quad(y)
"""

import logging
from typing import Final

from src.splitcomplex.domain.split_complex import SplitComplex, new
from src.splitcomplex.math.numerical_safeguards import (
    EPS_SPLIT_COMPARE,
    is_zero,
    sign_of,
)

logger = logging.getLogger(__name__)

# Компоненты идемпотентов (1 ± j) / 2
IDEMPOTENT_COMPONENT: Final[float] = 0.5


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDivisorError(ZeroDivisionError):
    """
    Знаменатель — zero divisor: quadrance в пределах EPS_SPLIT_COMPARE от 0.

    Zero divisors — ненулевые значения на диагоналях real = ±imag (и сам
    ноль). У них нет мультипликативного обратного, поэтому invert() и
    divide() — частичные операции. Наследует ZeroDivisionError, чтобы
    общие обработчики деления тоже его ловили.
    """

    pass


# =============================================================================
# LINEAR OPERATIONS
# =============================================================================


def scale(z: SplitComplex, a: float) -> SplitComplex:
    """Покомпонентное умножение на вещественный скаляр a."""
    return new(z.real * a, z.imag * a)


def negate(z: SplitComplex) -> SplitComplex:
    """-z, то есть scale(z, -1)."""
    return scale(z, -1.0)


def conjugate(z: SplitComplex) -> SplitComplex:
    """
    Split-complex сопряжение: вещественная часть без изменений,
    split-часть меняет знак.

    Examples:
        >>> conjugate(new(3, 4))
        SplitComplex(real=3.0, imag=-4.0)
    """
    return new(z.real, -z.imag)


def add(x: SplitComplex, y: SplitComplex) -> SplitComplex:
    """Покомпонентная сумма."""
    return new(x.real + y.real, x.imag + y.imag)


def subtract(x: SplitComplex, y: SplitComplex) -> SplitComplex:
    """Покомпонентная разность x - y."""
    return new(x.real - y.real, x.imag - y.imag)


# =============================================================================
# MULTIPLICATION & QUADRANCE
# =============================================================================


def multiply(x: SplitComplex, y: SplitComplex) -> SplitComplex:
    """
    Split-complex произведение.

    (a + bj)(c + dj) = (ac + bd) + (ad + bc)j

    Коммутативно и ассоциативно. Оба операнда распаковываются до вычисления
    компонент результата, поэтому multiply(z, z) — это z².

    Examples:
        >>> multiply(new(0, 1), new(0, 1))
        SplitComplex(real=1.0, imag=0.0)
    """
    a, b = x.real, x.imag
    c, d = y.real, y.imag
    return new(a * c + b * d, a * d + b * c)


def quadrance(z: SplitComplex) -> float:
    """
    Quadrance: вещественная часть z·conj(z), равная real² - imag².

    В отличие от квадрата модуля обычного комплексного числа, форма
    знаконеопределённа: положительна внутри "timelike" конуса
    |real| > |imag|, отрицательна внутри "spacelike" конуса |real| < |imag|
    и равна нулю на диагоналях.

    Examples:
        >>> quadrance(new(3, 1))
        8.0
        >>> quadrance(new(0, 1))
        -1.0
    """
    return multiply(z, conjugate(z)).real


# =============================================================================
# ZERO DIVISORS, INVERSION, DIVISION
# =============================================================================


def is_zero_divisor(z: SplitComplex) -> bool:
    """
    True, если quadrance(z) в пределах EPS_SPLIT_COMPARE от нуля.

    Zero divisors — это ровно точки с real ≈ ±imag, включая 0.
    NaN-quadrance не близка к нулю, поэтому NaN-значения не zero divisors.
    """
    return is_zero(quadrance(z), EPS_SPLIT_COMPARE)


def _require_invertible(z: SplitComplex, role: str) -> float:
    quad = quadrance(z)
    if is_zero(quad, EPS_SPLIT_COMPARE):
        logger.debug("Rejected zero divisor %s %s (quadrance=%r)", role, z, quad)
        raise ZeroDivisorError(
            f"{role} {z} is a zero divisor (quadrance={quad!r}) "
            f"and has no unique inverse"
        )
    return quad


def invert(x: SplitComplex) -> SplitComplex:
    """
    Мультипликативный обратный элемент conj(x) / quadrance(x).

    Args:
        x: Обращаемое значение

    Returns:
        1/x, так что multiply(x, invert(x)) ≈ ONE

    Raises:
        ZeroDivisorError: x — zero divisor

    Examples:
        >>> invert(new(3, 1))
        SplitComplex(real=0.375, imag=-0.125)
    """
    quad = _require_invertible(x, "value")
    return scale(conjugate(x), 1.0 / quad)


def divide(x: SplitComplex, y: SplitComplex) -> SplitComplex:
    """
    Частное x / y = x·conj(y) / quadrance(y).

    Args:
        x: Числитель
        y: Знаменатель

    Returns:
        x / y

    Raises:
        ZeroDivisorError: y — zero divisor
    """
    quad = _require_invertible(y, "denominator")
    return scale(multiply(x, conjugate(y)), 1.0 / quad)


# =============================================================================
# IDEMPOTENTS
# =============================================================================


def idempotent(sign: int) -> SplitComplex:
    """
    Один из двух нетривиальных идемпотентов e = e·e.

    Args:
        sign: >= 0 выбирает (1 + j)/2, < 0 выбирает (1 - j)/2

    Returns:
        (0.5, +0.5) или (0.5, -0.5)
    """
    return new(IDEMPOTENT_COMPONENT, IDEMPOTENT_COMPONENT * sign_of(sign))
