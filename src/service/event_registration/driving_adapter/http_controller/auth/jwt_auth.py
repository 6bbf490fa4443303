"""
Access/refresh token codec (HS256 JWT)

Payload is always {id, email, name, isAdmin, role, type, iat, exp}. Access and
refresh tokens are signed with different secrets and carry their `type`, so one
can never stand in for the other.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.service.event_registration.app.dto.token_dto import TokenPair, TokenType, TokenVerification
from src.service.event_registration.app.interface.i_token_service import ITokenService
from src.service.event_registration.domain.principal import Principal


REQUIRED_CLAIMS = ('id', 'email', 'isAdmin', 'role', 'type', 'iat', 'exp')


class JwtAuth(ITokenService):
    def __init__(
        self,
        *,
        access_secret: Optional[str] = None,
        refresh_secret: Optional[str] = None,
        access_ttl_seconds: Optional[int] = None,
        refresh_ttl_seconds: Optional[int] = None,
    ) -> None:
        self.algorithm = settings.ALGORITHM
        self._secrets = {
            TokenType.ACCESS: access_secret or settings.JWT_SECRET.get_secret_value(),
            TokenType.REFRESH: refresh_secret or settings.JWT_REFRESH_SECRET.get_secret_value(),
        }
        self._ttl_seconds = {
            TokenType.ACCESS: access_ttl_seconds or settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            TokenType.REFRESH: refresh_ttl_seconds
            or settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        }

    def create_token(
        self, *, principal: Principal, token_type: TokenType, ttl_seconds: Optional[int] = None
    ) -> str:
        now = datetime.now(timezone.utc)
        ttl = self._ttl_seconds[token_type] if ttl_seconds is None else ttl_seconds
        payload = {
            'id': str(principal.id),
            'email': principal.email,
            'name': principal.name,
            'isAdmin': principal.is_admin,
            'role': principal.role.value,
            'type': token_type.value,
            'iat': int(now.timestamp()),
            'exp': int((now + timedelta(seconds=ttl)).timestamp()),
        }
        return jwt.encode(
            payload,
            self._secrets[token_type],
            algorithm=self.algorithm,
            headers={'typ': 'JWT'},
        )

    def create_token_pair(self, *, principal: Principal) -> TokenPair:
        return TokenPair(
            access_token=self.create_token(principal=principal, token_type=TokenType.ACCESS),
            refresh_token=self.create_token(principal=principal, token_type=TokenType.REFRESH),
        )

    def verify_token(self, *, token: str, token_type: TokenType) -> TokenVerification:
        try:
            claims: Dict[str, Any] = jwt.decode(
                token,
                self._secrets[token_type],
                algorithms=[self.algorithm],
                options={'require': ['exp', 'iat']},
            )
        except jwt.ExpiredSignatureError:
            return TokenVerification.fail('Token expired')
        except jwt.InvalidSignatureError:
            return TokenVerification.fail('Invalid signature')
        except jwt.DecodeError:
            return TokenVerification.fail('Invalid token format')
        except jwt.PyJWTError:
            return TokenVerification.fail('Token verification failed')

        if any(claim not in claims for claim in REQUIRED_CLAIMS):
            return TokenVerification.fail('Token verification failed')
        if claims['type'] != token_type.value:
            return TokenVerification.fail('Invalid token type')
        return TokenVerification.ok(claims)
