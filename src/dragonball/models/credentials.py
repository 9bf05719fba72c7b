"""Login credentials."""

from dataclasses import dataclass, field

from dragonball.http.auth import mask_credential


@dataclass(frozen=True)
class Credentials:
    """Username and password used once to build a basic-auth header."""

    username: str
    password: str = field(repr=False)

    def __str__(self) -> str:
        return f"Credentials(username={mask_credential(self.username)})"
