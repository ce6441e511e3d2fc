"""
Identity generation

Users and products share one canonical id type, the stdlib `uuid.UUID`.
New ids are UUID7 so they sort by creation time; values from uuid_utils are
converted so equality, hashing and pydantic/SQLAlchemy support all behave
like any other `uuid.UUID`.
"""

from uuid import UUID

import uuid_utils


def new_id() -> UUID:
    return UUID(str(uuid_utils.uuid7()))
