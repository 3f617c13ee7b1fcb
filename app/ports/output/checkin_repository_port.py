from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

CHECKIN_KEY_PREFIX = "checkin:"


class StorageStatus(Enum):
    """Resultado de una operación de almacenamiento"""
    OK = "ok"
    FAILED = "failed"


@dataclass
class WriteResult:
    """Resultado de escribir un registro"""
    status: StorageStatus
    key: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == StorageStatus.OK


@dataclass
class ReadResult:
    """
    Resultado de leer todos los registros de un espacio de nombres.
    `entries` son pares (clave, registro serializado); `skipped` las claves ilegibles.
    """
    status: StorageStatus
    entries: List[Tuple[str, str]] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == StorageStatus.OK


class CheckInRepositoryPort(ABC):
    """
    Contrato del adaptador de persistencia de check-ins.

    Oculta si el sustrato es un almacén clave-valor con espacios de nombres
    o un blob local único. Ninguna operación lanza excepciones: los fallos
    se registran en el log y se devuelven como resultado.
    """

    def key_for(self, record_id: int) -> str:
        """Clave de almacenamiento de un registro: "checkin:<id>" """
        return f"{CHECKIN_KEY_PREFIX}{record_id}"

    @abstractmethod
    async def put(self, key: str, value: str) -> WriteResult:
        """
        Escribe un registro serializado.

        Returns:
            WriteResult con status FAILED si el almacén rechazó la escritura
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Lee un registro serializado.

        Returns:
            El valor o None si no existe o no se pudo leer
        """
        pass

    @abstractmethod
    async def list_keys(self, prefix: str = CHECKIN_KEY_PREFIX) -> List[str]:
        """
        Enumera las claves bajo un prefijo.

        Returns:
            Lista de claves, vacía si la enumeración falla
        """
        pass

    @abstractmethod
    async def list_all(self, prefix: str = CHECKIN_KEY_PREFIX) -> ReadResult:
        """
        Lee todos los registros bajo un prefijo.
        Las claves que fallen se omiten y se anotan en `skipped`.
        """
        pass
