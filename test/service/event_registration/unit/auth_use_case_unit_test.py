"""
Unit tests for the identity use cases

Tests:
- Sign-up conflicts, including the unique-index race
- Login failure modes and admin precedence
- Access token resolution to a stored principal
- Refresh and organizer upgrade
"""

from unittest.mock import AsyncMock, MagicMock
import uuid

from pydantic import SecretStr
import pytest
from sqlalchemy.exc import IntegrityError

from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    ForbiddenError,
)
from src.service.event_registration.app.command.login_use_case import LoginUseCase
from src.service.event_registration.app.command.refresh_token_use_case import (
    RefreshTokenUseCase,
)
from src.service.event_registration.app.command.register_user_use_case import (
    RegisterUserUseCase,
)
from src.service.event_registration.app.command.upgrade_to_organizer_use_case import (
    UpgradeToOrganizerUseCase,
)
from src.service.event_registration.app.dto.token_dto import TokenType
from src.service.event_registration.app.query.get_current_principal_use_case import (
    GetCurrentPrincipalUseCase,
)
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity
from src.service.event_registration.domain.entity.user_entity import UserEntity
from src.service.event_registration.domain.enum.user_role import UserRole
from src.service.event_registration.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class _UniqueViolation(Exception):
    sqlstate = '23505'


@pytest.fixture
def jwt_auth() -> JwtAuth:
    return JwtAuth(access_secret='access', refresh_secret='refresh')


@pytest.mark.unit
class TestRegisterUser:
    @pytest.mark.asyncio
    async def test_registers_user_and_issues_token_pair(
        self, fake_uow, store, password_hasher, jwt_auth
    ):
        use_case = RegisterUserUseCase(
            uow=fake_uow, password_hasher=password_hasher, token_service=jwt_auth
        )

        result = await use_case.execute(
            email='Ada@Example.com', password=SecretStr('P@ssw0rd123'), name='Ada'
        )

        assert result.principal.email == 'ada@example.com'
        assert result.principal.role == UserRole.USER
        assert result.refresh_token is not None
        stored = store.users[result.principal.id]
        assert stored.password_hash != 'P@ssw0rd123'
        assert jwt_auth.verify_token(token=result.access_token, token_type=TokenType.ACCESS).valid

    @pytest.mark.asyncio
    async def test_email_held_by_admin_is_taken(self, fake_uow, store, password_hasher, jwt_auth):
        admin = AdminUserEntity(id=uuid.uuid4(), email='boss@gowra.com', name='Boss')
        store.admins[admin.id] = admin
        use_case = RegisterUserUseCase(
            uow=fake_uow, password_hasher=password_hasher, token_service=jwt_auth
        )

        with pytest.raises(ConflictError, match='Email already exists'):
            await use_case.execute(
                email='boss@gowra.com', password=SecretStr('P@ssw0rd123'), name='Boss'
            )

        assert store.users == {}

    @pytest.mark.asyncio
    async def test_unique_index_race_maps_to_conflict(self, fake_uow, password_hasher, jwt_auth):
        """
        Given: another sign-up with the same email commits first
        When: our insert hits the unique index
        Then: the caller sees the same 409 as the pre-check
        """
        fake_uow.user_command_repo.create = AsyncMock(
            side_effect=IntegrityError('INSERT INTO users', {}, _UniqueViolation())
        )
        use_case = RegisterUserUseCase(
            uow=fake_uow, password_hasher=password_hasher, token_service=jwt_auth
        )

        with pytest.raises(ConflictError, match='Email already exists'):
            await use_case.execute(
                email='ada@example.com', password=SecretStr('P@ssw0rd123'), name='Ada'
            )

    @pytest.mark.asyncio
    async def test_invalid_credentials_never_reach_storage(self, password_hasher, jwt_auth):
        uow = MagicMock()
        use_case = RegisterUserUseCase(uow=uow, password_hasher=password_hasher, token_service=jwt_auth)

        with pytest.raises(DomainError, match='Password must be at least 8 characters long'):
            await use_case.execute(email='ada@example.com', password=SecretStr('short'), name='Ada')

        uow.__aenter__.assert_not_called()


@pytest.mark.unit
class TestLogin:
    @pytest.fixture
    def principal_query_repo(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def use_case(self, principal_query_repo, password_hasher, jwt_auth) -> LoginUseCase:
        return LoginUseCase(
            principal_query_repo=principal_query_repo,
            password_hasher=password_hasher,
            token_service=jwt_auth,
        )

    @pytest.mark.asyncio
    async def test_missing_fields(self, use_case):
        with pytest.raises(DomainError, match='Email and password are required'):
            await use_case.execute(email='', password=SecretStr('x'))

    @pytest.mark.asyncio
    async def test_unknown_email(self, use_case, principal_query_repo):
        principal_query_repo.get_by_email.return_value = None

        with pytest.raises(AuthenticationError, match='Invalid email or password'):
            await use_case.execute(email='nobody@example.com', password=SecretStr('P@ssw0rd123'))

    @pytest.mark.asyncio
    async def test_wrong_password_same_message(self, use_case, principal_query_repo, password_hasher):
        principal_query_repo.get_by_email.return_value = UserEntity(
            id=uuid.uuid4(),
            email='ada@example.com',
            name='Ada',
            password_hash=password_hasher.hash_password(plain_password=SecretStr('P@ssw0rd123')),
        )

        with pytest.raises(AuthenticationError, match='Invalid email or password'):
            await use_case.execute(email='ada@example.com', password=SecretStr('wrong-password'))

    @pytest.mark.asyncio
    async def test_email_is_normalized_before_lookup(
        self, use_case, principal_query_repo, password_hasher
    ):
        principal_query_repo.get_by_email.return_value = UserEntity(
            id=uuid.uuid4(),
            email='ada@example.com',
            name='Ada',
            password_hash=password_hasher.hash_password(plain_password=SecretStr('P@ssw0rd123')),
        )

        result = await use_case.execute(
            email='  ADA@example.com ', password=SecretStr('P@ssw0rd123')
        )

        principal_query_repo.get_by_email.assert_awaited_once_with(email='ada@example.com')
        assert result.refresh_token is not None

    @pytest.mark.asyncio
    async def test_admin_wins_over_user_with_same_email(
        self, store, fake_principal_query_repo, password_hasher, jwt_auth
    ):
        """
        Given: the same email in both the admin and the user table
        When: logging in with the admin's password
        Then: the principal is the admin
        """
        hashed = password_hasher.hash_password(plain_password=SecretStr('P@ssw0rd123'))
        admin = AdminUserEntity(id=uuid.uuid4(), email='dual@gowra.com', name='A', password_hash=hashed)
        user = UserEntity(id=uuid.uuid4(), email='dual@gowra.com', name='U', password_hash=hashed)
        store.admins[admin.id] = admin
        store.users[user.id] = user
        use_case = LoginUseCase(
            principal_query_repo=fake_principal_query_repo,
            password_hasher=password_hasher,
            token_service=jwt_auth,
        )

        result = await use_case.execute(email='dual@gowra.com', password=SecretStr('P@ssw0rd123'))

        assert result.principal.is_admin
        assert result.principal.id == admin.id


@pytest.mark.unit
class TestGetCurrentPrincipal:
    @pytest.fixture
    def principal_query_repo(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def use_case(self, principal_query_repo, jwt_auth) -> GetCurrentPrincipalUseCase:
        return GetCurrentPrincipalUseCase(
            principal_query_repo=principal_query_repo, token_service=jwt_auth
        )

    @pytest.mark.asyncio
    async def test_no_token(self, use_case):
        with pytest.raises(AuthenticationError, match='No token provided'):
            await use_case.execute(access_token=None)

    @pytest.mark.asyncio
    async def test_refresh_token_is_not_an_access_token(self, use_case, jwt_auth):
        user = UserEntity(id=uuid.uuid4(), email='ada@example.com', name='Ada')
        token = jwt_auth.create_token(principal=user, token_type=TokenType.REFRESH)

        with pytest.raises(AuthenticationError):
            await use_case.execute(access_token=token)

    @pytest.mark.asyncio
    async def test_returns_stored_principal_not_token_claims(
        self, use_case, principal_query_repo, jwt_auth
    ):
        """
        Given: a token issued while the user still had role=user
        When: the stored row has since been upgraded
        Then: the resolved principal carries the stored role
        """
        user = UserEntity(id=uuid.uuid4(), email='ada@example.com', name='Ada')
        token = jwt_auth.create_token(principal=user, token_type=TokenType.ACCESS)
        upgraded = UserEntity(
            id=user.id, email=user.email, name=user.name, role=UserRole.ORGANIZER
        )
        principal_query_repo.get_by_id.return_value = upgraded

        principal = await use_case.execute(access_token=token)

        principal_query_repo.get_by_id.assert_awaited_once_with(principal_id=user.id, is_admin=False)
        assert principal.role == UserRole.ORGANIZER

    @pytest.mark.asyncio
    async def test_deleted_principal(self, use_case, principal_query_repo, jwt_auth):
        user = UserEntity(id=uuid.uuid4(), email='ada@example.com', name='Ada')
        principal_query_repo.get_by_id.return_value = None

        with pytest.raises(AuthenticationError, match='User not found'):
            await use_case.execute(
                access_token=jwt_auth.create_token(principal=user, token_type=TokenType.ACCESS)
            )


@pytest.mark.unit
class TestRefreshAndUpgrade:
    @pytest.mark.asyncio
    async def test_refresh_issues_access_token_only(self, jwt_auth):
        user = UserEntity(id=uuid.uuid4(), email='ada@example.com', name='Ada')
        repo = AsyncMock()
        repo.get_by_id.return_value = user
        use_case = RefreshTokenUseCase(principal_query_repo=repo, token_service=jwt_auth)

        result = await use_case.execute(
            refresh_token=jwt_auth.create_token(principal=user, token_type=TokenType.REFRESH)
        )

        assert result.refresh_token is None
        assert jwt_auth.verify_token(token=result.access_token, token_type=TokenType.ACCESS).valid

    @pytest.mark.asyncio
    async def test_refresh_rejects_access_token(self, jwt_auth):
        user = UserEntity(id=uuid.uuid4(), email='ada@example.com', name='Ada')
        use_case = RefreshTokenUseCase(principal_query_repo=AsyncMock(), token_service=jwt_auth)

        with pytest.raises(AuthenticationError, match='Invalid refresh token'):
            await use_case.execute(
                refresh_token=jwt_auth.create_token(principal=user, token_type=TokenType.ACCESS)
            )

    @pytest.mark.asyncio
    async def test_upgrade_issues_organizer_token(self, fake_uow, store, jwt_auth):
        user = UserEntity(id=uuid.uuid4(), email='ada@example.com', name='Ada')
        store.users[user.id] = user
        use_case = UpgradeToOrganizerUseCase(uow=fake_uow, token_service=jwt_auth)

        result = await use_case.execute(
            principal=user,
            organization_name='Ada Events',
            organization_type='company',
            event_types=['conference'],
        )

        claims = jwt_auth.verify_token(token=result.access_token, token_type=TokenType.ACCESS).claims
        assert claims['role'] == 'organizer'
        assert store.users[user.id].role == UserRole.ORGANIZER

    @pytest.mark.asyncio
    async def test_admin_cannot_upgrade(self, fake_uow, jwt_auth):
        admin = AdminUserEntity(id=uuid.uuid4(), email='admin@gowra.com', name='Admin')
        use_case = UpgradeToOrganizerUseCase(uow=fake_uow, token_service=jwt_auth)

        with pytest.raises(ForbiddenError, match='Admins cannot become organizers'):
            await use_case.execute(
                principal=admin,
                organization_name='X',
                organization_type='Y',
                event_types=['z'],
            )
