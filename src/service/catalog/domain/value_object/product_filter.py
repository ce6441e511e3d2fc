from typing import Optional
from uuid import UUID

import attrs


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


@attrs.frozen
class ProductFilter:
    """
    Which products a listing covers.

    The same filter drives both the page fetch and the total count, so
    `totalPage` always describes the list it accompanies.
    """

    seller_id: Optional[UUID] = None
    search_text: Optional[str] = attrs.field(default=None, converter=_blank_to_none)
