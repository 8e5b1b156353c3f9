from typing import Protocol

from educa.domain.identity.entities.administrator import Administrator


class AdministratorRepositoryProtocol(Protocol):
    def find_by_username(self, username: str) -> Administrator | None: ...

    def save(self, administrator: Administrator) -> Administrator: ...
