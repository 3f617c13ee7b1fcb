from dataclasses import dataclass
from typing import Any, Dict, Mapping

# Alias aceptados para cada campo (camelCase del formulario o snake_case)
_FIELD_ALIASES = {
    "guest_name": ("guest_name", "guestName"),
    "room_number": ("room_number", "roomNumber"),
    "check_in_date": ("check_in_date", "checkInDate"),
    "check_out_date": ("check_out_date", "checkOutDate"),
    "notes": ("notes",),
}


@dataclass
class AddCheckInCommand:
    """Comando para registrar un check-in (campos enviados por el formulario)."""
    guest_name: str
    room_number: str
    check_in_date: str = ""
    check_out_date: str = ""
    notes: str = ""

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> "AddCheckInCommand":
        """Acepta claves camelCase (formulario web) o snake_case"""
        values: Dict[str, str] = {}
        for name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if fields.get(alias) is not None:
                    values[name] = str(fields[alias])
                    break
        values.setdefault("guest_name", "")
        values.setdefault("room_number", "")
        return cls(**values)

