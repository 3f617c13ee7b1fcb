import json
from dataclasses import dataclass
from typing import Any, Dict


def _text(data: Dict[str, Any], key: str) -> str:
    """Campo de texto; ausente o null se lee como cadena vacía"""
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass(frozen=True)
class CheckIn:
    """
    Registro de un check-in de huésped.
    Python puro, sin dependencias.

    Inmutable: un registro se crea una sola vez y después solo se lee.
    """
    id: int
    guest_name: str
    room_number: str
    check_in_date: str
    created_at: str
    check_out_date: str = ""
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Forma serializada (claves camelCase)"""
        return {
            "id": self.id,
            "guestName": self.guest_name,
            "roomNumber": self.room_number,
            "checkInDate": self.check_in_date,
            "checkOutDate": self.check_out_date,
            "notes": self.notes,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckIn":
        """
        Construye un CheckIn desde su forma serializada.

        Raises:
            ValueError: Si el payload no es un objeto o no tiene id
        """
        if not isinstance(data, dict):
            raise ValueError(f"Check-in inválido, se esperaba un objeto: {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("Check-in inválido: falta 'id'")

        try:
            record_id = int(data["id"])
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Check-in inválido: id {data['id']!r} no es un entero") from e

        return cls(
            id=record_id,
            guest_name=_text(data, "guestName"),
            room_number=_text(data, "roomNumber"),
            check_in_date=_text(data, "checkInDate"),
            check_out_date=_text(data, "checkOutDate"),
            notes=_text(data, "notes"),
            created_at=_text(data, "createdAt"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "CheckIn":
        """Raises ValueError (json.JSONDecodeError incluido) si el texto no es válido"""
        return cls.from_dict(json.loads(text))

    def get_stay_summary(self) -> str:
        """Resumen de una línea para listados"""
        stay = self.check_in_date
        if self.check_out_date:
            stay = f"{stay} → {self.check_out_date}"
        return f"{self.guest_name} - Hab. {self.room_number} ({stay})"
