"""Tests for the decimal literal shorthand."""

import decimal
from decimal import Decimal

import pytest

import decarith
from decarith.numeric import literal, utils
from decarith.numeric.literal import decimal_from, is_literal, m


class TestDecimalFrom:

    @pytest.mark.parametrize('text, expected', [
        ('98.01', Decimal('98.01')),
        ('-0.25', Decimal('-0.25')),
        ('+3', Decimal(3)),
        ('.5', Decimal('0.5')),
        ('12.', Decimal(12)),
        ('1e-3', Decimal('0.001')),
        ('1E+2', Decimal(100)),
        ('  7.5 ', Decimal('7.5')),
        ('000123', Decimal(123)),
    ])
    def test_accepts(self, text, expected):
        result = decimal_from(text)
        assert isinstance(result, Decimal)
        assert result == expected

    def test_scale_is_preserved(self):
        assert decimal_from('1.50').as_tuple().exponent == -2
        assert decimal_from('1.5').as_tuple().exponent == -1
        assert str(decimal_from('1.50')) == '1.50'

    def test_scale_does_not_affect_equality(self):
        assert decimal_from('1.50') == decimal_from('1.5')

    def test_precision_is_not_limited_by_context(self):
        digits = '3.14159265358979323846264338327950288419716939937510'
        with decimal.localcontext() as ctx:
            ctx.prec = 5
            assert str(decimal_from(digits)) == digits

    @pytest.mark.parametrize('text', ['inf', 'Infinity', '-INF', '+infinity'])
    def test_infinities(self, text):
        assert decimal_from(text).is_infinite()

    @pytest.mark.parametrize('text', ['nan', 'NaN', '-nan'])
    def test_nan(self, text):
        assert decimal_from(text).is_qnan()

    @pytest.mark.parametrize('text', [
        '12x.3', '', '   ', '1_000', '1.2.3', 'e5', '-', '.', '0x10', '1,5', '1 000', 'sNaN', 'nan5',
    ])
    def test_malformed(self, text):
        with pytest.raises(utils.MalformedLiteral) as excinfo:
            decimal_from(text)
        assert excinfo.value.text == text

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError, match="'12x.3'"):
            decimal_from('12x.3')
        with pytest.raises(decarith.DecarithError):
            decimal_from('12x.3')

    def test_empty_literal_reason(self):
        with pytest.raises(utils.MalformedLiteral, match='empty literal') as excinfo:
            decimal_from('')
        assert excinfo.value.reason == 'empty literal'

    def test_malformed_raises_even_without_traps(self):
        with decimal.localcontext() as ctx:
            ctx.traps[decimal.InvalidOperation] = False
            with pytest.raises(utils.MalformedLiteral):
                decimal_from('12x.3')

    @pytest.mark.parametrize('x', [1.5, 2, Decimal('1.5'), None, b'1.5'])
    def test_non_string_is_type_error(self, x):
        with pytest.raises(TypeError):
            decimal_from(x)

    def test_aliases(self):
        assert m is decimal_from
        assert decarith.m is decimal_from
        assert literal.m('2.33') == Decimal('2.33')


class TestIsLiteral:

    def test_literals(self):
        assert is_literal('1.5')
        assert is_literal(' -2e3 ')
        assert is_literal('NaN')

    def test_not_literals(self):
        assert not is_literal('12x.3')
        assert not is_literal('')
        assert not is_literal('1_000')
        assert not is_literal(1.5)
