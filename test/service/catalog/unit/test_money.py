from decimal import Decimal

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.catalog.domain.value_object.money import to_minor_units


@pytest.mark.unit
class TestToMinorUnits:
    @pytest.mark.parametrize(
        'amount, expected',
        [
            ('25.50', 2550),
            (Decimal('25.5'), 2550),
            (19.99, 1999),
            (0.1, 10),
            (3, 300),
            (Decimal('10.005'), 1001),
            (Decimal('10.004'), 1000),
            ('10000000', 1_000_000_000),
        ],
    )
    def test_converts_major_units_rounding_half_up(self, amount, expected):
        assert to_minor_units(amount) == expected

    def test_result_is_int(self):
        assert isinstance(to_minor_units(Decimal('1.23')), int)

    @pytest.mark.parametrize('amount', [Decimal('NaN'), Decimal('Infinity'), True])
    def test_rejects_non_amounts(self, amount):
        with pytest.raises(DomainError):
            to_minor_units(amount)
