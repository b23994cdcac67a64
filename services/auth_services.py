import logging
from typing import Union

from pydantic import SecretStr

from core.database import DocumentStore
from core.errors import ConflictError, InvalidCredentials, ValidationError
from core.security import _to_plain, create_access_token, hash_password, verify_password
from models.user import User
from repositories.user_repo import UserRepository
from schemas.base import is_blank

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def _require_credentials(username: str | None, password: Union[str, SecretStr, None]) -> None:
        if is_blank(username) or is_blank(_to_plain(password)):
            raise ValidationError("Username and password are required")

    def register(self, *, username: str | None, password: Union[str, SecretStr, None]) -> tuple[User, str]:
        self._require_credentials(username, password)
        password_hash = hash_password(password)
        with self.store.transaction() as document:
            repo = UserRepository(document)
            if repo.get_by_username(username):
                raise ConflictError("User already exists")
            user = repo.create(username=username, password_hash=password_hash)
        logger.info("Registered user %s", username)
        return user, create_access_token(user.username)

    def login(self, *, username: str | None, password: Union[str, SecretStr, None]) -> tuple[User, str]:
        self._require_credentials(username, password)
        with self.store.snapshot() as document:
            user = UserRepository(document).get_by_username(username)
        if user is None:
            raise InvalidCredentials("User not found")
        if not verify_password(password, user.password_hash):
            raise InvalidCredentials("Invalid password")
        logger.info("User %s logged in", username)
        return user, create_access_token(user.username)
