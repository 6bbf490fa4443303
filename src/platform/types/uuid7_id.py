import uuid

import uuid_utils


def new_uuid7() -> uuid.UUID:
    """Time-ordered id, converted to stdlib UUID for SQLAlchemy and pydantic"""
    return uuid.UUID(str(uuid_utils.uuid7()))
