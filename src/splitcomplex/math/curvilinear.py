"""
Curvilinear Coordinates — гиперболическая полярная форма split-complex чисел

Гиперболический аналог полярных координат. Значение вне диагоналей
записывается как r·(cosh ξ + j·sinh ξ) или r·(sinh ξ + j·cosh ξ) в
зависимости от знака quadrance; у значений на диагоналях гиперболического
угла нет.

ФОРМУЛЫ:
    sign > 0 (|real| > |imag|):  z = (r·cosh ξ, r·sinh ξ),  ξ = atanh(imag/real)
    sign < 0 (|real| < |imag|):  z = (r·sinh ξ, r·cosh ξ),  ξ = atanh(real/imag)
    sign = 0 (|real| = |imag|):  z = (r, r),                ξ не определён (NaN)
    r = sqrt(|quadrance|) = sqrt(||real| - |imag||) · sqrt(|real| + |imag|)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rect() и curv() взаимно обратны вне null-области с точностью EPS_SPLIT_COMPARE
2. Переполнение cosh/sinh даёт ±inf, а не исключение
3. Для sign != 0 радиус из curv() неотрицателен; rect() с r < 0 попадает
   на отражённую ветвь
"""

import math
from typing import NamedTuple

from src.splitcomplex.domain.split_complex import SplitComplex, new


# =============================================================================
# TYPES
# =============================================================================


class CurvilinearCoordinates(NamedTuple):
    """Радиус, гиперболический угол и знак quadrance split-complex значения."""

    r: float
    xi: float
    sign: int

    def to_split_complex(self) -> SplitComplex:
        """Обратно в декартову форму через rect()."""
        return rect(self.r, self.xi, self.sign)


# =============================================================================
# HYPERBOLIC FACTORS
# =============================================================================


def _cosh(xi: float) -> float:
    # math.cosh бросает OverflowError при |xi| > ~710
    try:
        return math.cosh(xi)
    except OverflowError:
        return math.inf


def _sinh(xi: float) -> float:
    try:
        return math.sinh(xi)
    except OverflowError:
        return math.copysign(math.inf, xi)


# =============================================================================
# FORWARD / INVERSE MAPS
# =============================================================================


def rect(r: float, xi: float, sign: int) -> SplitComplex:
    """
    Split-complex значение из curvilinear-координат.

    Множители cosh/sinh, переполнившиеся для большого |xi|, становятся ±inf
    и затем умножаются на r по правилам float (r = 0 даёт NaN).

    Args:
        r: Радиус
        xi: Гиперболический угол (игнорируется при sign == 0)
        sign: Селектор знака quadrance, -1 / 0 / +1

    Returns:
        sign > 0: (r·cosh ξ, r·sinh ξ)
        sign < 0: (r·sinh ξ, r·cosh ξ)
        sign = 0: (r, r)
    """
    if sign > 0:
        return new(r * _cosh(xi), r * _sinh(xi))
    if sign < 0:
        return new(r * _sinh(xi), r * _cosh(xi))
    return new(r, r)


def curv(z: SplitComplex) -> CurvilinearCoordinates:
    """
    Curvilinear-координаты z вместе со знаком quadrance.

    Ветвь выбирается сравнением |real| и |imag|, что совпадает со знаком
    real² - imag², но не ломается, когда квадраты переполняются
    (curv(new(1e200, 1e199)) — timelike, sign = +1). Радиус считается как
    произведение корней по той же причине. Сравнение точное, без
    EPS_SPLIT_COMPARE: значение чуть в стороне от диагонали получает
    (большой) гиперболический угол.

    Значения с NaN-компонентой и значения с двумя бесконечными компонентами
    попадают в ветвь sign == 0.

    Returns:
        CurvilinearCoordinates(r, xi, sign); xi = NaN при sign == 0

    Examples:
        >>> curv(new(1, 0))
        CurvilinearCoordinates(r=1.0, xi=0.0, sign=1)
    """
    a, b = abs(z.real), abs(z.imag)

    if a > b:
        r = math.sqrt(a - b) * math.sqrt(a + b)
        return CurvilinearCoordinates(r, math.atanh(z.imag / z.real), +1)

    if a < b:
        r = math.sqrt(b - a) * math.sqrt(a + b)
        return CurvilinearCoordinates(r, math.atanh(z.real / z.imag), -1)

    # Null (lightlike) область: z = (r, ±r)
    return CurvilinearCoordinates(z.real, math.nan, 0)
