import attrs


@attrs.frozen
class PageWindow:
    """1-based page of `limit` items."""

    page: int = attrs.field(validator=attrs.validators.ge(1))
    limit: int = attrs.field(validator=attrs.validators.ge(1))

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total_count: int) -> int:
        # ceil without float division
        return -(-total_count // self.limit)
