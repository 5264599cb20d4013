"""
Тесты для Dimensional Markers: TwoDimensional / ThreeDimensional

Проверяет:
1. Векторное произведение (значения, антикоммутативность, a × a = 0)
2. Проверку размерности при создании класса с маркером
3. Guards require_two_dimensional / require_three_dimensional
"""

from fractions import Fraction

import numpy as np
import pytest

from spade_vectors import (
    ArrayVector2,
    ArrayVector3,
    ArrayVector4,
    DimensionMismatchError,
    NumpyVector2,
    NumpyVector3,
    ThreeDimensional,
    TwoDimensional,
    require_three_dimensional,
    require_two_dimensional,
)
from spade_vectors.bindings.arrays import ArrayVector

CROSS_PAIRS = [
    (ArrayVector3(1, 0, 0), ArrayVector3(0, 1, 0)),
    (ArrayVector3(1, 2, 3), ArrayVector3(4, 5, 6)),
    (ArrayVector3(-3, 7, 0), ArrayVector3(2, -2, 11)),
]


# =============================================================================
# CROSS PRODUCT
# =============================================================================


class TestCrossProduct:
    """Тесты cross"""

    def test_unit_axes(self) -> None:
        x = ArrayVector3(1, 0, 0)
        y = ArrayVector3(0, 1, 0)
        z = ArrayVector3(0, 0, 1)
        assert x.cross(y) == z
        assert y.cross(z) == x
        assert z.cross(x) == y

    def test_known_value(self) -> None:
        assert ArrayVector3(1, 2, 3).cross(ArrayVector3(4, 5, 6)) == ArrayVector3(-3, 6, -3)

    @pytest.mark.parametrize("a, b", CROSS_PAIRS)
    def test_anti_commutative(self, a, b) -> None:
        assert a.cross(b) == b.cross(a).mul(-1)

    @pytest.mark.parametrize("a, b", CROSS_PAIRS)
    def test_self_cross_is_zero(self, a, b) -> None:
        assert a.cross(a) == ArrayVector3.new()
        assert b.cross(b) == ArrayVector3.new()

    @pytest.mark.parametrize("a, b", CROSS_PAIRS)
    def test_orthogonal_to_inputs(self, a, b) -> None:
        c = a.cross(b)
        assert c.dot(a) == 0
        assert c.dot(b) == 0

    def test_result_keeps_binding_type(self) -> None:
        result = NumpyVector3(1.0, 0.0, 0.0).cross(NumpyVector3(0.0, 1.0, 0.0))
        assert isinstance(result, NumpyVector3)
        np.testing.assert_array_equal(result.to_array(), [0.0, 0.0, 1.0])

    def test_cross_not_available_for_other_dimensions(self) -> None:
        assert not hasattr(ArrayVector2(1, 2), "cross")
        assert not hasattr(ArrayVector4(1, 2, 3, 4), "cross")


# =============================================================================
# ПРОВЕРКА ПРИ СОЗДАНИИ КЛАССА
# =============================================================================


class TestMarkerVerification:
    """Маркер проверяет dimensions() один раз, при создании класса"""

    def test_bindings_carry_expected_markers(self) -> None:
        assert issubclass(ArrayVector2, TwoDimensional)
        assert issubclass(NumpyVector2, TwoDimensional)
        assert issubclass(ArrayVector3, ThreeDimensional)
        assert issubclass(NumpyVector3, ThreeDimensional)
        assert not issubclass(ArrayVector4, TwoDimensional)
        assert not issubclass(ArrayVector4, ThreeDimensional)

    def test_wrong_two_dimensional_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError, match="marked TwoDimensional"):

            class Bad(ArrayVector, TwoDimensional):
                @classmethod
                def dimensions(cls) -> int:
                    return 3

    def test_wrong_three_dimensional_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError, match="marked ThreeDimensional"):

            class Bad(ArrayVector, ThreeDimensional):
                @classmethod
                def dimensions(cls) -> int:
                    return 4

    def test_abstract_intermediate_allowed(self) -> None:
        """Без реализации dimensions() проверка откладывается"""

        class Planar(TwoDimensional):
            pass

        class Concrete(ArrayVector, Planar):
            @classmethod
            def dimensions(cls) -> int:
                return 2

        assert Concrete(1, 2).dimensions() == 2

    def test_specialized_binding_keeps_marker(self) -> None:
        FractionVector3 = ArrayVector3.with_scalar(Fraction)
        assert issubclass(FractionVector3, ThreeDimensional)
        one, nil = Fraction(1), Fraction(0)
        result = FractionVector3(one, nil, nil).cross(FractionVector3(nil, one, nil))
        assert result == FractionVector3(nil, nil, one)
        assert all(type(value) is Fraction for value in result)


# =============================================================================
# GUARDS
# =============================================================================


class TestGuards:
    """Тесты require_two_dimensional / require_three_dimensional"""

    def test_two_dimensional_passes_through(self) -> None:
        v = ArrayVector2(1, 2)
        assert require_two_dimensional(v) is v

    def test_three_dimensional_passes_through(self) -> None:
        v = NumpyVector3(1.0, 2.0, 3.0)
        assert require_three_dimensional(v) is v

    @pytest.mark.parametrize("value", [ArrayVector3(1, 2, 3), ArrayVector4(1, 2, 3, 4), (1, 2)])
    def test_two_dimensional_rejects(self, value) -> None:
        with pytest.raises(TypeError, match="Expected a TwoDimensional vector"):
            require_two_dimensional(value)

    @pytest.mark.parametrize("value", [ArrayVector2(1, 2), NumpyVector2(1.0, 2.0), [1, 2, 3]])
    def test_three_dimensional_rejects(self, value) -> None:
        with pytest.raises(TypeError, match="Expected a ThreeDimensional vector"):
            require_three_dimensional(value)
