from decimal import ROUND_HALF_UP, Decimal

from src.platform.exception.exceptions import DomainError


MINOR_UNITS_PER_MAJOR = Decimal(100)


def to_minor_units(amount: Decimal | int | float | str) -> int:
    """
    Convert a major-unit amount (e.g. 25.50) to integer minor units (2550).

    Rounds half-up on the third fractional digit: 10.005 -> 1001.
    Floats go through str() first so 0.1 stays 0.1 and not 0.1000000000000000055.
    """
    if isinstance(amount, bool):
        raise DomainError(f'Invalid price: {amount!r}')
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if not value.is_finite():
        raise DomainError(f'Invalid price: {amount!r}')
    return int((value * MINOR_UNITS_PER_MAJOR).quantize(Decimal(1), rounding=ROUND_HALF_UP))
