"""
Numerical Safeguards — примитивы толерантности

Скалярные хелперы, на которых держатся все приближённые сравнения библиотеки:
- Единая epsilon-константа для равенства компонент и детекции zero divisors
- Строгая проверка "отличаются не меньше чем на eps" (NaN отличается всегда)
- Проверка на ноль и селектор знака для curvilinear-отображений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнения строгие: |a - b| < eps — равенство, |a - b| == eps — уже нет
2. NaN никогда не попадает в толерантность, даже к самому себе
3. Все операции детерминированы и без побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения компонент split-complex значений.
# Та же полоса вокруг нуля определяет zero divisor по quadrance.
EPS_SPLIT_COMPARE: Final[float] = 1e-8


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def not_equals(a: float, b: float, eps: float = EPS_SPLIT_COMPARE) -> bool:
    """
    Проверка, отличаются ли два float не меньше чем на eps.

    Записано как пара односторонних сравнений, а не abs(a - b) >= eps:
    любой NaN-операнд проваливает оба сравнения, и результат — True.

    Args:
        a: Первое значение
        b: Второе значение
        eps: Абсолютная толерантность (default: EPS_SPLIT_COMPARE)

    Returns:
        True, если не выполняется |a - b| < eps

    Examples:
        >>> not_equals(1.0, 1.0 + 1e-10)
        False
        >>> not_equals(1.0, 1.1)
        True
        >>> not_equals(float('nan'), float('nan'))
        True
    """
    return not ((a - b) < eps and (b - a) < eps)


def is_close(a: float, b: float, eps: float = EPS_SPLIT_COMPARE) -> bool:
    """
    Проверка, совпадают ли два float в пределах eps.

    Точное отрицание not_equals; NaN не близок ни к чему.
    """
    return not not_equals(a, b, eps)


def is_zero(value: float, eps: float = EPS_SPLIT_COMPARE) -> bool:
    """
    Проверка, лежит ли значение строго внутри полосы (-eps, eps).

    Используется для детекции zero divisors по quadrance.

    Args:
        value: Проверяемое значение
        eps: Ширина полосы (default: EPS_SPLIT_COMPARE)

    Returns:
        True если abs(value) < eps; False для NaN и Inf
    """
    return is_close(value, 0.0, eps)


def sign_of(value: float) -> int:
    """
    Целочисленный селектор знака: +1 для value >= 0, иначе -1.

    Совпадает с конвенцией inf() и idempotent(): ноль выбирает
    положительную ветку. NaN выбирает отрицательную, т.к. NaN >= 0 ложно.

    Examples:
        >>> sign_of(3.5)
        1
        >>> sign_of(0.0)
        1
        >>> sign_of(-2)
        -1
    """
    if value >= 0:
        return 1
    return -1


def has_sign_bit(value: float) -> bool:
    """
    True, если у value выставлен знаковый бит (включая -0.0 и -inf).

    Нужно для форматирования: -0.0 печатается с минусом.
    """
    return math.copysign(1.0, value) < 0
