"""
Тесты для модели SplitComplex

Проверяет:
1. Создание и валидацию модели Pydantic
2. Immutability (frozen=True)
3. Специальные значения: ZERO, ONE, J, inf(), nan()
4. Equality с толерантностью и классификацию Inf/NaN
5. Форматирование "(a+bj)" со знаком из signbit
6. Операторы Python
"""

import math

import pytest
from pydantic import ValidationError

from src.splitcomplex import (
    J,
    ONE,
    ZERO,
    SplitComplex,
    ZeroDivisorError,
    equals,
    format_split_complex,
    inf,
    is_inf,
    is_nan,
    nan,
    new,
)

# =============================================================================
# CONSTRUCTION TESTS
# =============================================================================


class TestConstruction:
    """Тесты для new() и конструктора модели"""

    def test_new_passthrough(self) -> None:
        z = new(1.5, -2.25)
        assert z.real == 1.5
        assert z.imag == -2.25

    def test_keyword_constructor(self) -> None:
        assert SplitComplex(real=3.0, imag=4.0) == new(3.0, 4.0)

    def test_int_components_coerced_to_float(self) -> None:
        z = new(1, 2)
        assert isinstance(z.real, float)
        assert isinstance(z.imag, float)

    def test_accepts_inf_and_nan(self) -> None:
        """Компоненты покрывают всю расширенную прямую"""
        z = new(math.inf, math.nan)
        assert math.isinf(z.real)
        assert math.isnan(z.imag)

    def test_non_numeric_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            new("abc", 1.0)  # type: ignore[arg-type]

    def test_missing_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SplitComplex(real=1.0)  # type: ignore[call-arg]

    def test_immutable(self) -> None:
        """Модель должна быть immutable (frozen=True)"""
        z = new(1.0, 2.0)
        with pytest.raises(ValidationError):
            z.real = 5.0  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({new(1, 2), new(1, 2), new(2, 1)}) == 2


class TestSpecialValues:
    """Тесты для ZERO, ONE, J, inf(), nan()"""

    def test_constants(self) -> None:
        assert ZERO.cartesian() == (0.0, 0.0)
        assert ONE.cartesian() == (1.0, 0.0)
        assert J.cartesian() == (0.0, 1.0)

    @pytest.mark.parametrize(
        "sign_real, sign_imag, expected",
        [
            (-1, -1, (-math.inf, -math.inf)),
            (-1, +1, (-math.inf, math.inf)),
            (+1, -1, (math.inf, -math.inf)),
            (+1, +1, (math.inf, math.inf)),
            (0, 0, (math.inf, math.inf)),
        ],
    )
    def test_inf_signs(self, sign_real: int, sign_imag: int, expected: tuple) -> None:
        assert inf(sign_real, sign_imag).cartesian() == expected

    def test_nan(self) -> None:
        z = nan()
        assert math.isnan(z.real)
        assert math.isnan(z.imag)


class TestAccessors:
    """Тесты для cartesian(), with_real(), with_imag()"""

    def test_cartesian(self) -> None:
        assert new(3, -4).cartesian() == (3.0, -4.0)

    def test_with_real(self) -> None:
        z = new(1, 2)
        assert z.with_real(-1) == new(-1, 2)
        assert z == new(1, 2)

    def test_with_imag(self) -> None:
        assert ZERO.with_imag(2) == new(0, 2)

    def test_model_copy(self) -> None:
        z = new(1, 2)
        assert z.model_copy() == z


# =============================================================================
# EQUALITY & CLASSIFICATION TESTS
# =============================================================================


class TestEquals:
    """Тесты для equals()"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (ZERO, ZERO, True),
            (ONE, ONE, True),
            (ZERO, ONE, False),
            (new(1, 2), new(3, 4), False),
            (new(1, 2), new(1, 2 + 1e-10), True),
            (new(1, 2), new(1, 2 + 1e-7), False),
            (new(1 + 1e-7, 2), new(1, 2), False),
        ],
    )
    def test_equals(self, a: SplitComplex, b: SplitComplex, expected: bool) -> None:
        assert equals(a, b) is expected
        assert a.equals(b) is expected

    def test_symmetric(self) -> None:
        a, b = new(1, 2), new(1 + 5e-9, 2 - 5e-9)
        assert equals(a, b) == equals(b, a)

    def test_reflexive_for_finite(self) -> None:
        for z in (ZERO, ONE, J, new(-7.5, 1e12)):
            assert equals(z, z)

    def test_nan_never_equal(self) -> None:
        """NaN-компонента не проходит проверку толерантности, даже с собой"""
        z = nan()
        assert equals(z, z) is False
        assert equals(new(1, math.nan), new(1, math.nan)) is False
        assert equals(new(math.nan, 0), ZERO) is False
        assert equals(ZERO, new(math.nan, 0)) is False

    def test_exact_eq_differs_from_equals(self) -> None:
        """== остаётся точным сравнением полей"""
        a, b = new(1, 2), new(1, 2 + 1e-10)
        assert a != b
        assert equals(a, b)


class TestIsInf:
    """Тесты для is_inf()"""

    @pytest.mark.parametrize(
        "z, expected",
        [
            (ZERO, False),
            (ONE, False),
            (J, False),
            (new(3, 4), False),
            (new(1, math.inf), True),
            (new(-math.inf, 1), True),
            (new(math.inf, math.nan), True),
            (nan(), False),
        ],
    )
    def test_is_inf(self, z: SplitComplex, expected: bool) -> None:
        assert is_inf(z) is expected
        assert z.is_inf() is expected


class TestIsNaN:
    """Тесты для is_nan()"""

    @pytest.mark.parametrize(
        "z, expected",
        [
            (ZERO, False),
            (ONE, False),
            (J, False),
            (new(3, 4), False),
            (new(1, math.inf), False),
            (new(1, math.nan), True),
            (new(math.nan, 1), True),
            (nan(), True),
            # Бесконечность приоритетнее NaN
            (new(math.inf, math.nan), False),
            (new(math.nan, -math.inf), False),
        ],
    )
    def test_is_nan(self, z: SplitComplex, expected: bool) -> None:
        assert is_nan(z) is expected
        assert z.is_nan() is expected


# =============================================================================
# FORMATTING TESTS
# =============================================================================


class TestFormatting:
    """Тесты для str() / format_split_complex()"""

    @pytest.mark.parametrize(
        "z, expected",
        [
            (ZERO, "(0+0j)"),
            (ONE, "(1+0j)"),
            (J, "(0+1j)"),
            (new(1, 0), "(1+0j)"),
            (new(0, -1), "(0-1j)"),
            (new(3, -1), "(3-1j)"),
            (new(5, 7), "(5+7j)"),
            (new(4, 6), "(4+6j)"),
            (new(0.375, -0.125), "(0.375-0.125j)"),
            (new(-2.5, 1e-20), "(-2.5+1e-20j)"),
            (new(123456, 0), "(123456+0j)"),
            (new(1e6, 0), "(1e+06+0j)"),
            (new(1234567, -1e6), "(1.234567e+06-1e+06j)"),
            (new(0.0001, 1e-05), "(0.0001+1e-05j)"),
            (new(-1.5e-7, 2.5e100), "(-1.5e-07+2.5e+100j)"),
            (new(100, 0.1), "(100+0.1j)"),
        ],
    )
    def test_finite(self, z: SplitComplex, expected: str) -> None:
        assert str(z) == expected
        assert format_split_complex(z) == expected

    def test_negative_zero_uses_sign_bit(self) -> None:
        """-0.0 печатается со знаком минус"""
        assert str(new(1, -0.0)) == "(1-0j)"
        assert str(new(-0.0, 0.0)) == "(-0+0j)"

    @pytest.mark.parametrize(
        "sign_real, sign_imag, expected",
        [
            (-1, -1, "(-Inf-Infj)"),
            (-1, +1, "(-Inf+Infj)"),
            (+1, -1, "(+Inf-Infj)"),
            (+1, +1, "(+Inf+Infj)"),
        ],
    )
    def test_infinities(self, sign_real: int, sign_imag: int, expected: str) -> None:
        assert str(inf(sign_real, sign_imag)) == expected

    def test_nan(self) -> None:
        assert str(nan()) == "(NaN+NaNj)"
        assert str(new(1, -math.nan)) == "(1+NaNj)"

    def test_repr_is_model_repr(self) -> None:
        assert repr(new(1, 2)) == "SplitComplex(real=1.0, imag=2.0)"


# =============================================================================
# OPERATOR TESTS
# =============================================================================


class TestOperators:
    """Тесты для операторов Python"""

    def test_add_sub(self) -> None:
        assert (new(1, 2) + new(3, 4)).equals(new(4, 6))
        assert (new(1, 2) - new(3, 4)).equals(new(-2, -2))

    def test_neg_pos_invert(self) -> None:
        z = new(3, 4)
        assert (-z).equals(new(-3, -4))
        assert +z is z
        assert (~z).equals(new(3, -4))

    def test_mul(self) -> None:
        assert (J * J).equals(ONE)
        assert (new(1, 2) * 2).equals(new(2, 4))
        assert (2.0 * new(1, 2)).equals(new(2, 4))

    def test_truediv(self) -> None:
        z = new(3, 1)
        assert (z / z).equals(ONE)
        assert (new(2, 4) / 2).equals(new(1, 2))

    def test_truediv_by_zero_divisor(self) -> None:
        with pytest.raises(ZeroDivisorError):
            ONE / new(2, 2)

    def test_truediv_by_real_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            ONE / 0

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            new(1, 2) + 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            new(1, 2) * "x"  # type: ignore[operator]
        with pytest.raises(TypeError):
            new(1, 2) * True  # type: ignore[operator]
