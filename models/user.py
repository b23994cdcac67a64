from models.base import Record


class User(Record):
    username: str
    password_hash: str
