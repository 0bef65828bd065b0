from abc import ABC, abstractmethod


class EmailClient(ABC):
    """Outgoing email - application layer"""

    @abstractmethod
    async def send(self, recipient: str, subject: str, body: str) -> None:
        pass
