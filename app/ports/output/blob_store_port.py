from abc import ABC, abstractmethod
from typing import Optional


class BlobStorePort(ABC):
    """
    Contrato para un almacén local síncrono (estilo localStorage).
    Guarda cadenas completas bajo claves fijas, sin enumeración por prefijo.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Retorna la cadena almacenada o None si no existe"""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Guarda la cadena bajo la clave"""
        pass
