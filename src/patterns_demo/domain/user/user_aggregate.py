"""User entity."""
from pydantic import Field

from patterns_demo.domain.base.entity import Entity


class User(Entity):
    """An account identified by its name.

    Only a hash of the password is ever held here.
    """

    name: str = Field(min_length=1)
    password_hash: str = ""

    def change_password_hash(self, password_hash: str) -> None:
        self.password_hash = password_hash
