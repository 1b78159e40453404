"""
SplitComplex — модель split-complex числа

Split-complex число: z = a + b·j, где j² = +1 (а не -1, как у обычных
комплексных чисел). Также известны как гиперболические, двойные или
perplex-числа.

Immutable Pydantic модель с двумя компонентами. Здесь живут API
конструирования, accessors, форматирование, равенство с толерантностью и
IEEE-классификация; алгебра — в src.splitcomplex.math.arithmetic и
src.splitcomplex.math.curvilinear.

Обе компоненты пробегают всю расширенную прямую: ±inf и NaN — валидные
значения, а не ошибки.
"""

import math
from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field

from src.splitcomplex.math.numerical_safeguards import (
    EPS_SPLIT_COMPARE,
    has_sign_bit,
    not_equals,
    sign_of,
)

# Символ split-единицы в текстовом представлении
UNIT_SYMBOL: Final[str] = "j"

# Порог показателя, с которого число печатается в экспоненциальной форме
# (совпадает с %g для кратчайшего представления)
FORMAT_EXPONENT_THRESHOLD: Final[int] = 6


# =============================================================================
# SPLIT-COMPLEX MODEL
# =============================================================================


class SplitComplex(BaseModel):
    """
    Модель split-complex числа real + imag·j, j² = +1.

    Immutable модель (frozen=True): каждая операция создаёт новый экземпляр.

    `==` — точное сравнение полей от pydantic (NaN != NaN, значения
    hashable). Для сравнения с толерантностью используется equals().
    """

    real: float = Field(..., description="Вещественная компонента")
    imag: float = Field(..., description="Коэффициент при split-единице j")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def cartesian(self) -> tuple[float, float]:
        """Пара (real, imag)."""
        return (self.real, self.imag)

    def with_real(self, real: float) -> "SplitComplex":
        """Копия с заменённой вещественной компонентой."""
        return new(real, self.imag)

    def with_imag(self, imag: float) -> "SplitComplex":
        """Копия с заменённой split-компонентой."""
        return new(self.real, imag)

    # -------------------------------------------------------------------------
    # Equality & classification
    # -------------------------------------------------------------------------

    def equals(self, other: "SplitComplex") -> bool:
        """Равенство с толерантностью, см. equals()."""
        return equals(self, other)

    def is_inf(self) -> bool:
        """True, если хотя бы одна компонента бесконечна."""
        return is_inf(self)

    def is_nan(self) -> bool:
        """True, если есть NaN-компонента и нет бесконечных."""
        return is_nan(self)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return format_split_complex(self)

    # -------------------------------------------------------------------------
    # Operator protocol
    # -------------------------------------------------------------------------

    def __neg__(self) -> "SplitComplex":
        from src.splitcomplex.math import arithmetic

        return arithmetic.negate(self)

    def __pos__(self) -> "SplitComplex":
        return self

    def __invert__(self) -> "SplitComplex":
        from src.splitcomplex.math import arithmetic

        return arithmetic.conjugate(self)

    def __add__(self, other: object) -> "SplitComplex":
        from src.splitcomplex.math import arithmetic

        if not isinstance(other, SplitComplex):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other: object) -> "SplitComplex":
        from src.splitcomplex.math import arithmetic

        if not isinstance(other, SplitComplex):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __mul__(self, other: object) -> "SplitComplex":
        from src.splitcomplex.math import arithmetic

        if isinstance(other, SplitComplex):
            return arithmetic.multiply(self, other)
        if _is_real_scalar(other):
            return arithmetic.scale(self, float(other))  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> "SplitComplex":
        from src.splitcomplex.math import arithmetic

        if _is_real_scalar(other):
            return arithmetic.scale(self, float(other))  # type: ignore[arg-type]
        return NotImplemented

    def __truediv__(self, other: object) -> "SplitComplex":
        """
        Деление на split-complex значение или на вещественный скаляр.

        Raises:
            ZeroDivisorError: other — split-complex zero divisor
            ZeroDivisionError: other — вещественный ноль
        """
        from src.splitcomplex.math import arithmetic

        if isinstance(other, SplitComplex):
            return arithmetic.divide(self, other)
        if _is_real_scalar(other):
            return arithmetic.scale(self, 1.0 / float(other))  # type: ignore[arg-type]
        return NotImplemented


def _is_real_scalar(value: object) -> bool:
    # bool — подкласс int, но не осмысленный множитель
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# CONSTRUCTION
# =============================================================================


def new(real: float, imag: float) -> SplitComplex:
    """
    Создание real + imag·j. Точная передача значений, без нормализации.

    Raises:
        pydantic.ValidationError: компонента не является числом
    """
    return SplitComplex(real=real, imag=imag)


def inf(sign_real: int, sign_imag: int) -> SplitComplex:
    """
    Split-complex бесконечность с независимыми знаками компонент.

    Компонента равна +inf, если её знак >= 0, иначе -inf.

    Examples:
        >>> str(inf(-1, +1))
        '(-Inf+Infj)'
    """
    return new(
        math.copysign(math.inf, sign_of(sign_real)),
        math.copysign(math.inf, sign_of(sign_imag)),
    )


def nan() -> SplitComplex:
    """Split-complex NaN: обе компоненты NaN."""
    return new(math.nan, math.nan)


ZERO: Final[SplitComplex] = new(0.0, 0.0)
ONE: Final[SplitComplex] = new(1.0, 0.0)
J: Final[SplitComplex] = new(0.0, 1.0)


# =============================================================================
# EQUALITY & CLASSIFICATION
# =============================================================================


def equals(a: SplitComplex, b: SplitComplex) -> bool:
    """
    Приближённое равенство: обе компоненты отличаются меньше чем на
    EPS_SPLIT_COMPARE.

    Симметрично и рефлексивно для значений без NaN. NaN-компонента никогда
    не проходит проверку толерантности, поэтому значение с NaN не равно
    ничему, в том числе самому себе (поведение IEEE-754).
    """
    if not_equals(a.real, b.real, EPS_SPLIT_COMPARE):
        return False
    if not_equals(a.imag, b.imag, EPS_SPLIT_COMPARE):
        return False
    return True


def is_inf(z: SplitComplex) -> bool:
    """True, если хотя бы одна компонента бесконечна (любого знака)."""
    return math.isinf(z.real) or math.isinf(z.imag)


def is_nan(z: SplitComplex) -> bool:
    """
    True, если хотя бы одна компонента NaN и ни одна не бесконечна.

    Бесконечность приоритетнее: (inf, nan) классифицируется как
    бесконечность — то же правило, что cmath применяет к обычным
    комплексным числам.
    """
    if is_inf(z):
        return False
    return math.isnan(z.real) or math.isnan(z.imag)


# =============================================================================
# FORMATTING
# =============================================================================


def _format_float(value: float) -> str:
    """
    Кратчайшее представление float в стиле %g.

    Цифры берутся из repr (кратчайший round-trip), экспоненциальная форма
    используется при показателе < -4 или >= FORMAT_EXPONENT_THRESHOLD.

    Examples:
        >>> _format_float(123456.0)
        '123456'
        >>> _format_float(1e6)
        '1e+06'
        >>> _format_float(1234567.0)
        '1.234567e+06'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Inf" if value < 0 else "+Inf"

    number = Decimal(repr(value)).normalize()
    exponent = number.adjusted()

    if number and (exponent < -4 or exponent >= FORMAT_EXPONENT_THRESHOLD):
        sign, digits, _ = number.as_tuple()
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(d) for d in digits[1:])
        return f"{'-' if sign else ''}{mantissa}e{exponent:+03d}"

    return format(number, "f")


def format_split_complex(z: SplitComplex) -> str:
    """
    Текстовое представление "(a+bj)".

    Знак второго слагаемого берётся из знакового бита imag, поэтому -0.0
    печатается как "-0". NaN печатается "+NaN" независимо от знакового бита.

    Examples:
        >>> format_split_complex(new(4, 6))
        '(4+6j)'
        >>> format_split_complex(new(3, -1))
        '(3-1j)'
        >>> format_split_complex(new(1, -0.0))
        '(1-0j)'
        >>> format_split_complex(new(1e6, 0))
        '(1e+06+0j)'
    """
    real_text = _format_float(z.real)

    imag = z.imag
    if math.isnan(imag):
        imag_text = "+NaN"
    elif has_sign_bit(imag):
        # _format_float уже несёт знак минус
        imag_text = _format_float(imag)
    elif math.isinf(imag):
        imag_text = "+Inf"
    else:
        imag_text = "+" + _format_float(imag)

    return f"({real_text}{imag_text}{UNIT_SYMBOL})"
