import json
import logging
import os
from typing import Dict, Optional

from app.ports.output.blob_store_port import BlobStorePort

logger = logging.getLogger(__name__)


class JsonFileBlobStore(BlobStorePort):
    """
    localStorage en disco: un objeto JSON {clave: cadena} en un único fichero.

    Cada set_item reescribe el fichero completo (escritura a fichero temporal
    + os.replace) para no dejarlo a medias.
    """

    def __init__(self, path: str = "./data/hotel_checkins.json"):
        # Ruta absoluta para evitar confusiones con el directorio de trabajo
        self.path = os.path.abspath(path)
        logger.info(f"📦 Almacén local en: {self.path}")

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}

        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()
        if not content.strip():
            return {}

        items = json.loads(content)
        if not isinstance(items, dict):
            raise ValueError(f"{self.path} no contiene un objeto JSON")
        return items

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        finally:
            # Si el replace no llegó a ejecutarse, el temporal sigue ahí
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
