from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr
from sqlalchemy.exc import IntegrityError

from src.platform.config.di import Container
from src.platform.database.integrity import is_unique_violation
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_id import new_uuid7
from src.service.event_registration.app.dto.auth_dto import AuthResult
from src.service.event_registration.app.interface.i_password_hasher import IPasswordHasher
from src.service.event_registration.app.interface.i_token_service import ITokenService
from src.service.event_registration.domain.entity.user_entity import (
    UserEntity,
    validate_credentials,
)


class RegisterUserUseCase:
    """
    Sign up a regular user

    New accounts always start with role=user. An email held by either the
    users or the admin_users table is refused, so the two identity spaces
    never overlap through this path.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ) -> None:
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        token_service: ITokenService = Depends(Provide[Container.jwt_auth]),
    ) -> Self:
        return cls(uow=uow, password_hasher=password_hasher, token_service=token_service)

    @Logger.io
    async def execute(self, *, email: str, password: SecretStr, name: Optional[str]) -> AuthResult:
        validate_credentials(email=email, password=password.get_secret_value())
        user = UserEntity.create(
            id=new_uuid7(),
            email=email,
            name=name,
            password_hash=self.password_hasher.hash_password(plain_password=password),
        )

        try:
            async with self.uow:
                if await self.uow.principal_query_repo.email_exists(email=user.email):
                    raise ConflictError('Email already exists')
                user = await self.uow.user_command_repo.create(user=user)
                await self.uow.commit()
        except IntegrityError as e:
            # Concurrent sign-up with the same email lost the race on the unique index
            if is_unique_violation(e):
                raise ConflictError('Email already exists') from e
            raise

        Logger.base.info(f'👤 [REGISTER-USER] Created user {user.id}')
        tokens = self.token_service.create_token_pair(principal=user)
        return AuthResult(
            principal=user,
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
        )
