from abc import ABC, abstractmethod


class AuthService(ABC):
    @abstractmethod
    def verify_credentials(self, username: str, password: str) -> bool:
        pass
