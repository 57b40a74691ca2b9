from abc import ABC, abstractmethod

from auth_service.libs.result import Result


class IIdentityTokenVerifier(ABC):
    """Verifies bearer tokens issued by an external identity provider"""

    @abstractmethod
    def verify(self, token: str) -> Result[dict]:
        """Return the token claims, or an INVALID_TOKEN error"""
        pass
