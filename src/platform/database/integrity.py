from sqlalchemy.exc import IntegrityError


UNIQUE_VIOLATION = '23505'


def _sqlstate(error: object) -> str | None:
    return getattr(error, 'sqlstate', None) or getattr(error, 'pgcode', None)


def is_unique_violation(exc: IntegrityError) -> bool:
    """asyncpg surfaces the SQLSTATE on the DBAPI error or on its __cause__"""
    orig = exc.orig
    if _sqlstate(orig) == UNIQUE_VIOLATION:
        return True
    if orig is not None and _sqlstate(orig.__cause__) == UNIQUE_VIOLATION:
        return True
    return 'duplicate key' in str(exc).lower()
