from sqlalchemy import Column, String

from metadata_store.database import Base
from metadata_store.schemas.user_schema import User


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(255), primary_key=True)
    login = Column(String(255), nullable=False, default="")
    name = Column(String(255), nullable=False, default="")
    email = Column(String(255), nullable=False, default="")

    @classmethod
    def from_domain(cls, user: User) -> "UserRow":
        return cls(id=user.id, login=user.login, name=user.name, email=user.email)

    def to_domain(self, tokens=()) -> User:
        return User(
            id=self.id,
            login=self.login,
            name=self.name,
            email=self.email,
            tokens=[token.to_domain() for token in tokens],
        )
