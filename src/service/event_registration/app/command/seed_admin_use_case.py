from datetime import datetime, timezone
from typing import List

from pydantic import SecretStr
from sqlalchemy.exc import IntegrityError

from src.platform.database.integrity import is_unique_violation
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_id import new_uuid7
from src.service.event_registration.app.interface.i_password_hasher import IPasswordHasher
from src.service.event_registration.domain.entity.admin_user_entity import AdminUserEntity


class SeedAdminUseCase:
    """
    Boot-time admin seed, run from the app lifespan (not an HTTP route)

    Creates the default admin account when absent. Addresses listed in
    ADMIN_EMAILS without an admin row are only reported; passwords are never
    invented for them.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, password_hasher: IPasswordHasher) -> None:
        self.uow = uow
        self.password_hasher = password_hasher

    @Logger.io
    async def execute(
        self,
        *,
        email: str,
        password: SecretStr,
        name: str,
        admin_emails: List[str],
    ) -> bool:
        email = email.strip().lower()
        created = False

        try:
            async with self.uow:
                if await self.uow.principal_query_repo.get_admin_by_email(email=email) is None:
                    now = datetime.now(timezone.utc)
                    await self.uow.admin_user_command_repo.create(
                        admin=AdminUserEntity(
                            id=new_uuid7(),
                            email=email,
                            name=name,
                            password_hash=self.password_hasher.hash_password(
                                plain_password=password
                            ),
                            created_at=now,
                            updated_at=now,
                        )
                    )
                    await self.uow.commit()
                    created = True
        except IntegrityError as e:
            # Another worker seeded the same account first
            if not is_unique_violation(e):
                raise

        if created:
            Logger.base.info(f'🛡️ [SEED-ADMIN] Created default admin {email}')

        async with self.uow:
            for admin_email in admin_emails:
                admin_email = admin_email.strip().lower()
                if admin_email and admin_email != email:
                    existing = await self.uow.principal_query_repo.get_admin_by_email(
                        email=admin_email
                    )
                    if existing is None:
                        Logger.base.warning(
                            f'⚠️ [SEED-ADMIN] {admin_email} is listed in ADMIN_EMAILS '
                            'but has no admin account'
                        )

        return created
