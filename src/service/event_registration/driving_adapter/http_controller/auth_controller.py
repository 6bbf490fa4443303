from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.event_registration.app.command.login_use_case import LoginUseCase
from src.service.event_registration.app.command.refresh_token_use_case import (
    RefreshTokenUseCase,
)
from src.service.event_registration.app.command.register_user_use_case import (
    RegisterUserUseCase,
)
from src.service.event_registration.app.command.update_profile_use_case import (
    UpdateProfileUseCase,
)
from src.service.event_registration.app.command.upgrade_to_organizer_use_case import (
    UpgradeToOrganizerUseCase,
)
from src.service.event_registration.domain.principal import Principal
from src.service.event_registration.driving_adapter.http_controller.auth.role_auth import (
    require_auth,
)
from src.service.event_registration.driving_adapter.http_controller.schema.auth_schema import (
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    UpdateProfileRequest,
    UpgradeToOrganizerRequest,
    UserResponse,
)
from src.service.event_registration.driving_adapter.http_controller.schema.common_schema import (
    SuccessResponse,
)


router = APIRouter()


@router.post(
    '/register',
    response_model=AuthResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
@Logger.io
async def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> AuthResponse:
    result = await use_case.execute(
        email=request.email, password=request.password, name=request.name
    )
    return AuthResponse(
        message='User registered successfully',
        user=UserResponse.from_principal(result.principal),
        token=result.access_token,
        refresh_token=result.refresh_token,
    )


@router.post('/login', response_model=AuthResponse, response_model_exclude_none=True)
@Logger.io
async def login(
    request: LoginRequest,
    use_case: LoginUseCase = Depends(LoginUseCase.depends),
) -> AuthResponse:
    result = await use_case.execute(email=request.email, password=request.password)
    return AuthResponse(
        message='Login successful',
        user=UserResponse.from_principal(result.principal),
        token=result.access_token,
        refresh_token=result.refresh_token,
        is_admin=result.principal.is_admin,
    )


@router.post('/refresh', response_model=AuthResponse, response_model_exclude_none=True)
@Logger.io
async def refresh(
    request: RefreshRequest,
    use_case: RefreshTokenUseCase = Depends(RefreshTokenUseCase.depends),
) -> AuthResponse:
    result = await use_case.execute(refresh_token=request.refresh_token)
    return AuthResponse(
        message='Token refreshed successfully',
        user=UserResponse.from_principal(result.principal),
        token=result.access_token,
    )


@router.get('/me', response_model=AuthResponse, response_model_exclude_none=True)
@Logger.io
async def get_me(principal: Principal = Depends(require_auth)) -> AuthResponse:
    return AuthResponse(user=UserResponse.from_principal(principal))


@router.put('/profile', response_model=AuthResponse, response_model_exclude_none=True)
@Logger.io
async def update_profile(
    request: UpdateProfileRequest,
    principal: Principal = Depends(require_auth),
    use_case: UpdateProfileUseCase = Depends(UpdateProfileUseCase.depends),
) -> AuthResponse:
    updated = await use_case.execute(principal=principal, name=request.name)
    return AuthResponse(
        message='Profile updated successfully', user=UserResponse.from_principal(updated)
    )


@router.post('/logout', response_model=SuccessResponse)
@Logger.io
async def logout(principal: Principal = Depends(require_auth)) -> SuccessResponse:
    """Tokens are stateless; clients drop them. Only a valid token may log out."""
    return SuccessResponse(message='Logged out successfully')


@router.post(
    '/upgrade-to-organizer', response_model=AuthResponse, response_model_exclude_none=True
)
@Logger.io
async def upgrade_to_organizer(
    request: UpgradeToOrganizerRequest,
    principal: Principal = Depends(require_auth),
    use_case: UpgradeToOrganizerUseCase = Depends(UpgradeToOrganizerUseCase.depends),
) -> AuthResponse:
    result = await use_case.execute(
        principal=principal,
        organization_name=request.organization_name,
        organization_type=request.organization_type,
        event_types=request.event_types,
        organization_description=request.organization_description,
        organization_website=request.organization_website,
    )
    return AuthResponse(
        message='Successfully upgraded to organizer',
        user=UserResponse.from_principal(result.principal),
        token=result.access_token,
    )
