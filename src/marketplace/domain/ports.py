# src/marketplace/domain/ports.py
from abc import ABC, abstractmethod


class LikesCountPort(ABC):
    """
    Abstrakte Schnittstelle für den Likes-Zähler im Read-Model.
    Der CatalogService kennt ausschließlich dieses Interface.
    """

    @abstractmethod
    async def count(self, product_ids: list[int]) -> dict[int, int]:
        """
        Liefert den anzuzeigenden Likes-Zähler je Produkt-ID.
        Jede übergebene ID ist im Ergebnis enthalten.
        """
        ...


# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class UsernameTakenError(Exception):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
        self.username = username
