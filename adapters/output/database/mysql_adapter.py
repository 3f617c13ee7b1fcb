import mysql.connector
import logging
import asyncio
from typing import List, Optional
from app.ports.output.key_value_store_port import KeyValueStorePort

logger = logging.getLogger(__name__)


class MySQLKeyValueStore(KeyValueStorePort):
    """
    Almacén clave-valor sobre una tabla MySQL (storage_key → value).
    El driver es bloqueante: cada operación se ejecuta en el executor por defecto.
    """

    def __init__(self, host, user, password, database, port=3306, table="checkin_store"):
        self.config = {
            'host': host,
            'user': user,
            'password': password,
            'database': database,
            'port': port
        }
        self.table = table
        self.conn = None
        # La conexión inicial es bloqueante (se hace al inicio una sola vez)
        self._connect()

    def _connect(self) -> None:
        """Un único intento de conexión; sin conexión las operaciones fallan"""
        try:
            self.conn = mysql.connector.connect(**self.config)
            cursor = self.conn.cursor()
            cursor.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.table} (
                    storage_key VARCHAR(255) PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
                )
            """)
            self.conn.commit()
            cursor.close()
            logger.info("✅ Conectado a MySQL exitosamente")
        except mysql.connector.Error as err:
            logger.error(f"❌ No se pudo conectar a MySQL: {err}. La persistencia no funcionará.")
            self.conn = None

    def _ensure_connection(self) -> None:
        if self.conn is None:
            raise ConnectionError("No hay conexión a BD")
        if not self.conn.is_connected():
            # Reconexión puntual si se perdió (un intento)
            self.conn.reconnect(attempts=1, delay=0)

    async def _run(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    async def set(self, key: str, value: str) -> None:
        await self._run(self._set_sync, key, value)

    def _set_sync(self, key: str, value: str) -> None:
        self._ensure_connection()
        cursor = self.conn.cursor()
        try:
            sql = (f"INSERT INTO {self.table} (storage_key, value) VALUES (%s, %s) "
                   "ON DUPLICATE KEY UPDATE value = VALUES(value)")
            cursor.execute(sql, (key, value))
            self.conn.commit()
        finally:
            cursor.close()

    async def get(self, key: str) -> Optional[str]:
        return await self._run(self._get_sync, key)

    def _get_sync(self, key: str) -> Optional[str]:
        self._ensure_connection()
        cursor = self.conn.cursor()
        try:
            cursor.execute(f"SELECT value FROM {self.table} WHERE storage_key = %s", (key,))
            row = cursor.fetchone()
        finally:
            cursor.close()
        return row[0] if row else None

    async def list(self, prefix: str) -> List[str]:
        return await self._run(self._list_sync, prefix)

    def _list_sync(self, prefix: str) -> List[str]:
        self._ensure_connection()
        # Escapar comodines de LIKE en el prefijo
        pattern = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_") + "%"
        cursor = self.conn.cursor()
        try:
            cursor.execute(f"SELECT storage_key FROM {self.table} WHERE storage_key LIKE %s", (pattern,))
            rows = cursor.fetchall()
        finally:
            cursor.close()
        return [row[0] for row in rows]
