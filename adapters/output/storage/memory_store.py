from typing import Dict, List, Optional

from app.ports.output.blob_store_port import BlobStorePort
from app.ports.output.key_value_store_port import KeyValueStorePort


class InMemoryKeyValueStore(KeyValueStorePort):
    """
    Simula el almacén clave-valor para desarrollo local y tests.
    No requiere MySQL instalado. Los datos se pierden al cerrar.
    """

    def __init__(self):
        self._data: Dict[str, str] = {}

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def list(self, prefix: str) -> List[str]:
        return [key for key in self._data if key.startswith(prefix)]


class InMemoryBlobStore(BlobStorePort):
    """Equivalente en memoria de localStorage"""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
