from core.database import Document
from models.user import User


class UserRepository:
    def __init__(self, document: Document):
        self.users = document["users"]

    def get_by_username(self, username: str) -> User | None:
        for record in self.users:
            if record.get("username") == username:
                return User.model_validate(record)
        return None

    def create(self, *, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        self.users.append(user.to_document())
        return user
