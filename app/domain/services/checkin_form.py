from dataclasses import dataclass
from typing import List

from app.domain.commands import AddCheckInCommand
from app.domain.services.checkin_service import normalize_date


@dataclass
class CheckInForm:
    """
    Estado del formulario de check-in.
    La validación vive aquí, en el borde de la UI, no en el servicio.
    """
    guest_name: str = ""
    room_number: str = ""
    check_in_date: str = ""
    check_out_date: str = ""
    notes: str = ""

    def validate(self) -> List[str]:
        """
        Valida los campos obligatorios y la coherencia de fechas.

        Returns:
            Lista de errores (vacía si el formulario es válido)
        """
        errors = []

        if not self.guest_name.strip():
            errors.append("El nombre del huésped es obligatorio")
        if not self.room_number.strip():
            errors.append("El número de habitación es obligatorio")

        check_in = normalize_date(self.check_in_date)
        if not self.check_in_date.strip():
            errors.append("La fecha de check-in es obligatoria")
        elif check_in is None:
            errors.append(f"Fecha de check-in no válida: {self.check_in_date}")

        if self.check_out_date.strip():
            check_out = normalize_date(self.check_out_date)
            if check_out is None:
                errors.append(f"Fecha de check-out no válida: {self.check_out_date}")
            elif check_in is not None and check_out < check_in:
                errors.append("La fecha de check-out no puede ser anterior al check-in")

        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def to_command(self) -> AddCheckInCommand:
        return AddCheckInCommand(
            guest_name=self.guest_name.strip(),
            room_number=self.room_number.strip(),
            check_in_date=self.check_in_date.strip(),
            check_out_date=self.check_out_date.strip(),
            notes=self.notes.strip(),
        )

    def clear(self) -> None:
        """Limpia el formulario tras el envío"""
        self.guest_name = ""
        self.room_number = ""
        self.check_in_date = ""
        self.check_out_date = ""
        self.notes = ""
