from abc import ABC, abstractmethod
from typing import List, Optional


class KeyValueStorePort(ABC):
    """
    Contrato para un almacén clave-valor con espacios de nombres (posiblemente remoto).
    Las claves se enumeran por prefijo ("checkin:" → todos los check-ins).

    Las implementaciones lanzan excepciones ante fallos; el adaptador
    de persistencia es quien las captura.
    """

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Escribe un valor bajo una clave (sobrescribe si existe)"""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Lee el valor de una clave.

        Returns:
            El valor almacenado o None si la clave no existe
        """
        pass

    @abstractmethod
    async def list(self, prefix: str) -> List[str]:
        """
        Enumera las claves que empiezan por el prefijo.

        Returns:
            Lista de claves (sin orden garantizado)
        """
        pass
