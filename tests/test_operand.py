"""Tests for the Operand wrapper."""

import decimal
from decimal import Decimal

import pytest

from decarith import Operand, DecimalCtx, RM, m, UnsupportedOperand


class TestArithmetic:

    def test_documented_examples(self):
        assert Operand(m('1')) + 3.1415 == m('4.1415')
        assert 3.19 - Operand(m('5.45')) == m('-2.26')
        assert 7 * Operand(m('2.33')) == m('16.31')
        assert Operand(m('3')) / 4 == m('0.75')
        assert Operand(m('98.01')) * m('10.01') == m('981.0801')

    def test_results_are_operands(self):
        result = Operand(3) + m('2.33')
        assert isinstance(result, Operand)
        assert isinstance(result.value, Decimal)
        assert result.value == m('5.33')

    def test_reflected_with_decimal(self):
        result = m('2.33') + Operand(3)
        assert isinstance(result, Operand)
        assert result.value == m('5.33')

    def test_two_operands(self):
        assert (Operand(7) * Operand(m('2.33'))).value == m('16.31')

    def test_natives_stay_native(self):
        result = Operand(1) + 2
        assert result.value == 3
        assert type(result.value) is int
        assert (Operand(1) / 2).value == 0.5

    def test_price_with_tax(self):
        total = (Operand(m('34.78')) * (1 + 23 / 100)).round(2)
        assert total == m('42.78')
        assert str(total) == '42.78'

    def test_unary(self):
        assert (-Operand(m('2.5'))).value == m('-2.5')
        assert (-Operand(3)).value == -3
        x = Operand(m('1.5'))
        assert +x is x

    def test_abs(self):
        assert abs(Operand(-3)).value == 3
        assert abs(Operand(m('-1.5'))).value == m('1.5')
        assert abs(Operand(m('1.5'))).value == m('1.5')

    def test_round(self):
        assert Operand(m('2.665')).round(2).value == m('2.67')
        assert Operand(m('2.665')).round(2, rm=RM.RNE).value == m('2.66')
        assert Operand(2.675).round(2).value == m('2.68')

    def test_ctx_is_used_and_carried(self):
        ctx = DecimalCtx(prec=3)
        third = Operand(m('1'), ctx=ctx) / 3
        assert third.value == Decimal('0.333')
        assert third.ctx is ctx
        assert (third * 2).value == Decimal('0.666')

    def test_division_by_zero(self):
        with pytest.raises(decimal.DivisionByZero):
            Operand(m('1')) / 0
        with pytest.raises(ZeroDivisionError):
            Operand(1) / 0

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            Operand(1) + 'x'
        with pytest.raises(TypeError):
            'x' * Operand(m('2'))
        with pytest.raises(TypeError):
            Operand(1) + None


class TestComparison:

    def test_documented_examples(self):
        assert Operand(m('3.15')) == 3.15
        assert Operand(m('5.304')) == 5.304
        assert Operand(m('1.00001')) != m('1.00002')
        assert not (3.15 != Operand(m('3.15')))

    def test_ordering(self):
        assert Operand(2) < m('2.5')
        assert Operand(m('2.50')) >= 2.5
        assert not (Operand(m('2.5')) <= 2.4)
        assert Operand(m('3')) > Operand(2.99)

    def test_reflected_ordering(self):
        assert m('2.5') > Operand(2)
        assert 2.4 < Operand(m('2.5'))

    def test_comparisons_return_bool(self):
        assert (Operand(1) == m('1')) is True
        assert (Operand(1) < m('0.5')) is False

    def test_unsupported_comparison(self):
        assert Operand(1) != 'x'
        assert not (Operand(1) == 'x')
        with pytest.raises(TypeError):
            Operand(1) < 'x'

    def test_hash_agrees_with_equality(self):
        assert hash(Operand(3.15)) == hash(Operand(m('3.15')))
        assert hash(Operand(2)) == hash(Operand(m('2.00')))
        assert len({Operand(3.15), Operand(m('3.15')), Operand(m('3.150'))}) == 1

    def test_operand_keys_find_equal_operands(self):
        prices = {Operand(m('3.15')): 'x'}
        assert prices[Operand(3.15)] == 'x'
        # bare floats hash as floats, not as their decimal rendering
        assert Operand(3.15) == 3.15
        assert {3.15: 'x'}.get(Operand(3.15)) is None


class TestWrapping:

    def test_value(self):
        d = m('1.50')
        assert Operand(d).value is d

    def test_rewrapping(self):
        ctx = DecimalCtx(prec=5)
        inner = Operand(5, ctx=ctx)
        outer = Operand(inner)
        assert outer.value == 5
        assert outer.ctx is ctx

    def test_rejects_non_numbers(self):
        with pytest.raises(UnsupportedOperand):
            Operand('1.5')

    def test_kind(self):
        assert Operand(m('1')).is_decimal()
        assert not Operand(1.0).is_decimal()

    def test_conversions(self):
        assert float(Operand(m('1.5'))) == 1.5
        assert int(Operand(m('7.9'))) == 7
        assert str(Operand(m('1.50'))) == '1.50'
        assert repr(Operand(1)) == 'Operand(1)'
        assert repr(Operand(m('2.5'))) == "Operand(Decimal('2.5'))"
        assert not Operand(m('0'))
