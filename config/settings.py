import os
from dataclasses import dataclass, field
from typing import Literal


@dataclass
class Settings:
    """
    Configuración centralizada desde variables de entorno (.env).

    Todas las configuraciones se cargan desde .env usando python-dotenv.
    Esto permite cambiar configuración sin modificar código.
    """

    # =========================================================================
    # Storage Configuration
    # =========================================================================
    # "blob": un único array JSON (estilo localStorage)
    # "kv": clave por registro ("checkin:<id>") en un almacén clave-valor
    storage_backend: Literal["blob", "kv"] = field(default_factory=lambda: os.getenv("STORAGE_BACKEND", "blob"))
    kv_provider: Literal["memory", "mysql"] = field(default_factory=lambda: os.getenv("KV_PROVIDER", "memory"))
    blob_path: str = field(default_factory=lambda: os.getenv("BLOB_PATH", "./data/hotel_checkins.json"))
    blob_storage_key: str = field(default_factory=lambda: os.getenv("BLOB_STORAGE_KEY", "hotel-checkins"))

    # MySQL Settings (solo con KV_PROVIDER=mysql)
    db_host: str = field(default_factory=lambda: os.getenv("DB_HOST", "localhost"))
    db_port: int = field(default_factory=lambda: int(os.getenv("DB_PORT", "3306")))
    db_name: str = field(default_factory=lambda: os.getenv("DB_NAME", "hotel_checkins"))
    db_user: str = field(default_factory=lambda: os.getenv("DB_USER", "root"))
    db_password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", "root"))

    # =========================================================================
    # UI Configuration
    # =========================================================================
    recent_limit: int = field(default_factory=lambda: int(os.getenv("RECENT_LIMIT", "10")))

    # =========================================================================
    # Logging / Debug
    # =========================================================================
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "False").lower() == "true")

    def validate(self) -> None:
        """
        Valida que la configuración sea completa.

        Raises:
            ValueError: Si faltan configuraciones críticas
        """
        errors = []

        if self.storage_backend not in ("blob", "kv"):
            errors.append(f"❌ STORAGE_BACKEND debe ser 'blob' o 'kv', recibido: {self.storage_backend}")

        if self.storage_backend == "kv" and self.kv_provider not in ("memory", "mysql"):
            errors.append(f"❌ KV_PROVIDER debe ser 'memory' o 'mysql', recibido: {self.kv_provider}")

        if self.storage_backend == "blob":
            if not self.blob_path:
                errors.append("❌ BLOB_PATH requerida para el almacén local")
            if not self.blob_storage_key:
                errors.append("❌ BLOB_STORAGE_KEY no puede estar vacía")

        if self.storage_backend == "kv" and self.kv_provider == "mysql" and not self.db_name:
            errors.append("❌ DB_NAME requerida para MySQL")

        if self.recent_limit <= 0:
            errors.append(f"❌ RECENT_LIMIT debe ser positivo, recibido: {self.recent_limit}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"❌ LOG_LEVEL no válido: {self.log_level}")

        if errors:
            raise ValueError("Configuración inválida:\n" + "\n".join(errors))
