from enum import StrEnum


class UserRole(StrEnum):
    USER = 'user'
    ORGANIZER = 'organizer'
    ADMIN = 'admin'  # Only ever carried by admin principals, never stored on users
