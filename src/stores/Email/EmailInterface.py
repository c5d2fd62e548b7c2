from abc import ABC, abstractmethod
from typing import List

class EmailInterface(ABC):

    @abstractmethod
    async def send_email(self, recipients: List[str], subject: str, body: str) -> dict:
        """Deliver `body` to `recipients`.

        Returns a dict with the provider-assigned `message_id` and the
        `recipients` the message was addressed to.
        """
        pass
