import logging
from typing import Optional

from config.settings import Settings
from app.ports.output.blob_store_port import BlobStorePort
from app.ports.output.key_value_store_port import KeyValueStorePort
from app.ports.output.checkin_repository_port import CheckInRepositoryPort
from app.domain.services.checkin_service import CheckInService

logger = logging.getLogger(__name__)


class DIContainer:
    """
    Contenedor de Inyección de Dependencias.

    Responsable de:
    1. Crear instancias de adaptadores
    2. Cablear dependencias
    3. Garantizar una sola instancia por contenedor (lazy loading)

    El servicio recibe el adaptador de persistencia explícitamente:
    no hay estado global.
    """

    def __init__(self, settings: Settings):
        """
        Constructor.

        Args:
            settings: Configuración validada
        """
        self.settings = settings

        # Instancias (lazy loading)
        self._kv_store: Optional[KeyValueStorePort] = None
        self._blob_store: Optional[BlobStorePort] = None
        self._checkin_repository: Optional[CheckInRepositoryPort] = None
        self._checkin_service: Optional[CheckInService] = None

    def get_key_value_store(self) -> KeyValueStorePort:
        """
        Factory del almacén clave-valor.
        Decide si usar MySQL real o Mock (memoria) según configuración.
        """
        if self._kv_store is None:
            if self.settings.kv_provider == "mysql":
                logger.info("🔌 Conectando a Base de Datos MySQL...")
                from adapters.output.database.mysql_adapter import MySQLKeyValueStore

                self._kv_store = MySQLKeyValueStore(
                    host=self.settings.db_host,
                    user=self.settings.db_user,
                    password=self.settings.db_password,
                    database=self.settings.db_name,
                    port=self.settings.db_port
                )
            else:
                logger.warning("⚠️ Almacén clave-valor en memoria: los datos se pierden al salir")
                from adapters.output.storage.memory_store import InMemoryKeyValueStore
                self._kv_store = InMemoryKeyValueStore()

        return self._kv_store

    def get_blob_store(self) -> BlobStorePort:
        """Factory del almacén local (fichero JSON en disco)"""
        if self._blob_store is None:
            from adapters.output.storage.json_file_store import JsonFileBlobStore
            self._blob_store = JsonFileBlobStore(self.settings.blob_path)

        return self._blob_store

    def get_checkin_repository(self) -> CheckInRepositoryPort:
        """
        Factory del adaptador de persistencia.

        Returns:
            Implementación del contrato CheckInRepositoryPort
        """
        if self._checkin_repository is None:
            if self.settings.storage_backend == "kv":
                from adapters.output.storage.namespaced_kv_repository import NamespacedKVCheckInRepository
                self._checkin_repository = NamespacedKVCheckInRepository(self.get_key_value_store())
            elif self.settings.storage_backend == "blob":
                from adapters.output.storage.blob_repository import BlobCheckInRepository
                self._checkin_repository = BlobCheckInRepository(
                    self.get_blob_store(),
                    storage_key=self.settings.blob_storage_key
                )
            else:
                raise ValueError(f"Storage backend no soportado: {self.settings.storage_backend}")

        return self._checkin_repository

    def get_checkin_service(self) -> CheckInService:
        """Factory para CheckInService"""
        if self._checkin_service is None:
            self._checkin_service = CheckInService(self.get_checkin_repository())

        return self._checkin_service

    async def initialize(self) -> None:
        """
        Valida la configuración y carga los componentes.

        Raises:
            ValueError: Si la configuración es inválida
        """
        logger.info("🚀 Inicializando mostrador de check-in...")
        self.settings.validate()

        repository = self.get_checkin_repository()
        logger.info(f"📦 Persistencia: {type(repository).__name__} ({self.settings.storage_backend})")

        # Lectura de prueba: un fallo aquí no es fatal, solo se avisa
        keys = await repository.list_keys()
        logger.info(f"📊 {len(keys)} check-in(s) almacenados")

        self.get_checkin_service()
        logger.info("✓ Sistema listo")
