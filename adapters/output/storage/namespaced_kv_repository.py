import logging
from typing import List, Optional

from app.ports.output.checkin_repository_port import (
    CHECKIN_KEY_PREFIX,
    CheckInRepositoryPort,
    ReadResult,
    StorageStatus,
    WriteResult,
)
from app.ports.output.key_value_store_port import KeyValueStorePort

logger = logging.getLogger(__name__)


class NamespacedKVCheckInRepository(CheckInRepositoryPort):
    """
    Persistencia sobre un almacén clave-valor con espacios de nombres.

    Cada check-in vive bajo su propia clave "checkin:<id>" y se enumeran
    con un escaneo por prefijo. Una llamada al host por registro.
    """

    def __init__(self, store: KeyValueStorePort):
        self.store = store

    async def put(self, key: str, value: str) -> WriteResult:
        try:
            await self.store.set(key, value)
            return WriteResult(StorageStatus.OK, key)
        except Exception as e:
            logger.error(f"Error guardando check-in {key}: {e}")
            return WriteResult(StorageStatus.FAILED, key, error=str(e))

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.store.get(key)
        except Exception as e:
            logger.error(f"Error leyendo check-in {key}: {e}")
            return None

    async def list_keys(self, prefix: str = CHECKIN_KEY_PREFIX) -> List[str]:
        try:
            keys = await self.store.list(prefix)
        except Exception as e:
            logger.error(f"Error listando claves '{prefix}': {e}")
            return []
        return list(keys or [])

    async def list_all(self, prefix: str = CHECKIN_KEY_PREFIX) -> ReadResult:
        try:
            keys = await self.store.list(prefix)
        except Exception as e:
            logger.error(f"Error obteniendo check-ins: {e}")
            return ReadResult(StorageStatus.FAILED, error=str(e))

        result = ReadResult(StorageStatus.OK)
        for key in keys or []:
            try:
                value = await self.store.get(key)
            except Exception as e:
                logger.error(f"Error leyendo check-in {key}: {e}")
                result.skipped.append(key)
                continue

            # Clave listada pero sin valor: se ignora en silencio
            if value:
                result.entries.append((key, value))

        return result
