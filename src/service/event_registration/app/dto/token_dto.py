from enum import StrEnum
from typing import Any, Dict, Optional

import attrs


class TokenType(StrEnum):
    ACCESS = 'access'
    REFRESH = 'refresh'


@attrs.define(frozen=True)
class TokenVerification:
    """Outcome of verifying a token; claims are only present when valid"""

    valid: bool
    claims: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, claims: Dict[str, Any]) -> 'TokenVerification':
        return cls(valid=True, claims=claims)

    @classmethod
    def fail(cls, error: str) -> 'TokenVerification':
        return cls(valid=False, error=error)


@attrs.define(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
