from abc import ABC, abstractmethod
from typing import Optional

from src.service.event_registration.app.dto.token_dto import TokenPair, TokenType, TokenVerification
from src.service.event_registration.domain.principal import Principal


class ITokenService(ABC):
    @abstractmethod
    def create_token(
        self, *, principal: Principal, token_type: TokenType, ttl_seconds: Optional[int] = None
    ) -> str:
        pass

    @abstractmethod
    def create_token_pair(self, *, principal: Principal) -> TokenPair:
        pass

    @abstractmethod
    def verify_token(self, *, token: str, token_type: TokenType) -> TokenVerification:
        pass
