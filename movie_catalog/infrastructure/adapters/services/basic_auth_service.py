import secrets

from pwdlib import PasswordHash

from movie_catalog.domain.ports.services.auth_service import AuthService
from movie_catalog.infrastructure.config.settings import Settings


class BasicAuthService(AuthService):
    """Checks HTTP Basic credentials against the single configured account.

    The plain password from settings is hashed once at construction and only
    the hash is kept around.
    """

    def __init__(self, settings: Settings):
        self.pwd_context = PasswordHash.recommended()
        self._username = settings.BASIC_AUTH_USERNAME
        self._password_hash = self.pwd_context.hash(settings.BASIC_AUTH_PASSWORD)

    def verify_credentials(self, username: str, password: str) -> bool:
        username_ok = secrets.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        password_ok = self.pwd_context.verify(password, self._password_hash)
        return username_ok and password_ok
