import json
import logging
from typing import Any, Dict, List, Optional

from app.ports.output.blob_store_port import BlobStorePort
from app.ports.output.checkin_repository_port import (
    CHECKIN_KEY_PREFIX,
    CheckInRepositoryPort,
    ReadResult,
    StorageStatus,
    WriteResult,
)

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "hotel-checkins"


class BlobCheckInRepository(CheckInRepositoryPort):
    """
    Persistencia sobre un blob local único (estilo localStorage).

    Toda la colección es un array JSON bajo una clave fija. Cada operación
    lee el array completo y, si escribe, lo reescribe entero. Los registros
    nuevos se anteponen, así que el blob queda del más reciente al más antiguo.

    El host es síncrono; los métodos son async solo para cumplir el contrato.
    """

    def __init__(self, store: BlobStorePort, storage_key: str = DEFAULT_STORAGE_KEY):
        self.store = store
        self.storage_key = storage_key

    def _load_collection(self) -> List[Any]:
        """Lee y parsea el array completo (lanza excepción si está corrupto)"""
        raw = self.store.get_item(self.storage_key)
        if not raw:
            return []

        collection = json.loads(raw)
        if not isinstance(collection, list):
            raise ValueError(f"'{self.storage_key}' no contiene un array JSON")
        return collection

    def _key_of(self, item: Any) -> Optional[str]:
        if isinstance(item, dict) and item.get("id") is not None:
            return self.key_for(item["id"])
        return None

    async def put(self, key: str, value: str) -> WriteResult:
        try:
            record: Dict[str, Any] = json.loads(value)
            collection = self._load_collection()

            # Misma clave: se reemplaza en su posición; si no, se antepone
            for index, item in enumerate(collection):
                if self._key_of(item) == key:
                    collection[index] = record
                    break
            else:
                collection.insert(0, record)

            self.store.set_item(self.storage_key, json.dumps(collection, ensure_ascii=False))
            return WriteResult(StorageStatus.OK, key)
        except Exception as e:
            logger.error(f"Error guardando check-in {key}: {e}")
            return WriteResult(StorageStatus.FAILED, key, error=str(e))

    async def get(self, key: str) -> Optional[str]:
        try:
            collection = self._load_collection()
        except Exception as e:
            logger.error(f"Error leyendo check-in {key}: {e}")
            return None

        for item in collection:
            if self._key_of(item) == key:
                return json.dumps(item, ensure_ascii=False)
        return None

    async def list_keys(self, prefix: str = CHECKIN_KEY_PREFIX) -> List[str]:
        try:
            collection = self._load_collection()
        except Exception as e:
            logger.error(f"Error listando claves '{prefix}': {e}")
            return []

        keys = [self._key_of(item) for item in collection]
        return [key for key in keys if key and key.startswith(prefix)]

    async def list_all(self, prefix: str = CHECKIN_KEY_PREFIX) -> ReadResult:
        try:
            collection = self._load_collection()
        except Exception as e:
            logger.error(f"Error obteniendo check-ins: {e}")
            return ReadResult(StorageStatus.FAILED, error=str(e))

        result = ReadResult(StorageStatus.OK)
        for index, item in enumerate(collection):
            key = self._key_of(item)
            if key is None:
                logger.error(f"Error leyendo check-in: elemento {index} de '{self.storage_key}' inválido")
                result.skipped.append(f"{self.storage_key}[{index}]")
                continue
            if key.startswith(prefix):
                result.entries.append((key, json.dumps(item, ensure_ascii=False)))

        return result
