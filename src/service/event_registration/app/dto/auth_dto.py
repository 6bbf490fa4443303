from typing import Optional

import attrs

from src.service.event_registration.domain.principal import Principal


@attrs.define(frozen=True)
class AuthResult:
    principal: Principal
    access_token: str
    refresh_token: Optional[str] = None
