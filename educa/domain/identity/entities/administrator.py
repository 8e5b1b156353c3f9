"""Administrator credential entity."""

from dataclasses import dataclass

from educa.domain.common.entity import Entity
from educa.domain.common.exceptions import ValidationError
from educa.domain.common.value_objects.ids import AdministratorId


@dataclass(eq=False)
class Administrator(Entity[AdministratorId]):
    """
    An operator allowed to manage the catalog and the enrollment ledger.

    Only the password hash is kept; hashing is an infrastructure concern.
    """

    id: AdministratorId
    username: str
    hashed_password: str

    def __post_init__(self) -> None:
        if not self.username or not self.username.strip():
            raise ValidationError("Username cannot be empty", field="username")
        if not self.hashed_password:
            raise ValidationError("Password cannot be empty", field="password")

    @classmethod
    def create(cls, username: str, hashed_password: str) -> "Administrator":
        return cls(
            id=AdministratorId.generate(),
            username=username.strip(),
            hashed_password=hashed_password,
        )
