import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Union

from app.domain.commands import AddCheckInCommand
from app.domain.entities.checkin import CheckIn
from app.ports.output.checkin_repository_port import CHECKIN_KEY_PREFIX, CheckInRepositoryPort

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ResultStatus(Enum):
    OK = "ok"
    STORAGE_ERROR = "storage_error"


@dataclass
class CheckInResult:
    """Resultado explícito de registrar un check-in"""
    status: ResultStatus
    check_in: Optional[CheckIn] = None
    error: Optional[str] = None


@dataclass
class CheckInListResult:
    """Resultado explícito de listar check-ins (claves omitidas incluidas)"""
    status: ResultStatus
    check_ins: List[CheckIn] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    error: Optional[str] = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_date(value: Any) -> Optional[date]:
    """
    Reduce una fecha a su día de calendario, tal y como está escrita.
    Se descartan la hora y el offset de zona horaria.

    Acepta date, datetime o cadenas ISO-8601 ("2024-03-01",
    "2024-03-01T23:30:00-05:00", "2024-03-01 08:00Z").

    Returns:
        La fecha o None si no se puede interpretar (nunca lanza)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


class CheckInService:
    """
    Servicio de dominio para registrar y consultar check-ins.

    No valida el contenido de los campos: eso corresponde al formulario
    (ver CheckInForm). Los fallos de almacenamiento nunca se propagan.
    """

    def __init__(self, repository: CheckInRepositoryPort, clock: Optional[Clock] = None):
        """
        Constructor.

        Args:
            repository: Adaptador de persistencia (blob local o clave-valor)
            clock: Fuente de la hora actual (UTC); inyectable para tests
        """
        self.repository = repository
        self.clock = clock or _utc_now
        self._last_id = 0

    def _next_id(self, now: datetime) -> int:
        """Timestamp en milisegundos, siempre creciente dentro de esta instancia"""
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _build_check_in(self, command: AddCheckInCommand) -> CheckIn:
        now = self.clock()
        created_at = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return CheckIn(
            id=self._next_id(now),
            guest_name=command.guest_name,
            room_number=command.room_number,
            check_in_date=command.check_in_date,
            check_out_date=command.check_out_date,
            notes=command.notes,
            created_at=created_at,
        )

    async def save_check_in(self, fields: Union[AddCheckInCommand, Mapping[str, Any]]) -> CheckInResult:
        """
        Registra un check-in y devuelve el resultado explícito.

        Args:
            fields: Comando o mapping con los campos del formulario

        Returns:
            CheckInResult con el registro creado o el error de almacenamiento
        """
        command = fields if isinstance(fields, AddCheckInCommand) else AddCheckInCommand.from_mapping(fields)
        check_in = self._build_check_in(command)
        key = self.repository.key_for(check_in.id)

        written = await self.repository.put(key, check_in.to_json())
        if not written.ok:
            logger.warning(f"⚠️ Check-in de '{check_in.guest_name}' no guardado: {written.error}")
            return CheckInResult(ResultStatus.STORAGE_ERROR, error=written.error)

        logger.info(f"📝 Check-in guardado: {key} ({check_in.guest_name}, hab. {check_in.room_number})")
        return CheckInResult(ResultStatus.OK, check_in=check_in)

    async def add_check_in(self, fields: Union[AddCheckInCommand, Mapping[str, Any]]) -> Optional[CheckIn]:
        """Registra un check-in. Retorna None si el almacenamiento falló"""
        result = await self.save_check_in(fields)
        return result.check_in

    async def load_check_ins(self) -> CheckInListResult:
        """Lee todos los check-ins; los registros ilegibles se omiten"""
        read = await self.repository.list_all(CHECKIN_KEY_PREFIX)
        if not read.ok:
            return CheckInListResult(ResultStatus.STORAGE_ERROR, error=read.error)

        result = CheckInListResult(ResultStatus.OK, skipped=list(read.skipped))
        for key, value in read.entries:
            try:
                result.check_ins.append(CheckIn.from_json(value))
            except Exception as e:
                logger.error(f"Error leyendo check-in {key}: {e}")
                result.skipped.append(key)

        if result.skipped:
            logger.warning(f"⚠️ {len(result.skipped)} check-in(s) omitidos por errores de lectura")
        return result

    async def get_check_ins(self) -> List[CheckIn]:
        """Todos los check-ins almacenados, sin orden garantizado"""
        result = await self.load_check_ins()
        return result.check_ins

    async def get_check_ins_by_date(self, target: Union[str, date, datetime]) -> List[CheckIn]:
        """
        Check-ins cuya fecha de entrada cae en el mismo día que `target`.
        Los registros con fecha ilegible quedan fuera del resultado.
        """
        target_date = normalize_date(target)
        if target_date is None:
            logger.warning(f"Fecha de búsqueda no válida: {target!r}")
            return []

        check_ins = await self.get_check_ins()
        return [c for c in check_ins if normalize_date(c.check_in_date) == target_date]

    async def get_recent_check_ins(self, limit: Optional[int] = None) -> List[CheckIn]:
        """Check-ins del más reciente al más antiguo (por id de creación)"""
        check_ins = sorted(await self.get_check_ins(), key=lambda c: c.id, reverse=True)
        if limit is not None:
            return check_ins[:limit]
        return check_ins
