from abc import ABC, abstractmethod


class IResetNotifier(ABC):
    """Delivers password reset tokens to account owners"""

    @abstractmethod
    async def send_reset_token(self, email: str, username: str, token: str) -> None:
        """Hand the plaintext reset token to the delivery channel"""
        pass
