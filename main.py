import asyncio
import sys
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

# Configurar path
sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv

# Configuración de Logging Estructurado
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("HotelCheckIn")

from config.settings import Settings
from config.container import DIContainer
from app.domain.entities.checkin import CheckIn
from app.domain.services.checkin_form import CheckInForm
from app.domain.services.checkin_service import CheckInService

MENU = """
  1. Nuevo check-in
  2. Check-ins recientes
  3. Check-ins por fecha
  4. Check-ins de hoy
  0. Salir
"""


class HotelCheckInDeskApp:
    """
    Mostrador de check-in en consola: formulario + listado de recientes.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.container = DIContainer(settings)
        self.service: Optional[CheckInService] = None
        self.form = CheckInForm()
        self._loop = None  # Referencia al loop principal

    async def initialize(self) -> None:
        logging.getLogger().setLevel(self.settings.log_level)
        self._loop = asyncio.get_running_loop()
        await self.container.initialize()
        self.service = self.container.get_checkin_service()

    async def _ask(self, prompt: str) -> str:
        """input() es bloqueante: se ejecuta en el executor"""
        answer = await self._loop.run_in_executor(None, input, prompt)
        return answer.strip()

    def _print_check_ins(self, title: str, check_ins: List[CheckIn]) -> None:
        print(f"\n{title} ({len(check_ins)})\n" + "-" * 60)
        if not check_ins:
            print("  (sin registros)")
        for check_in in check_ins:
            print(f"  • {check_in.get_stay_summary()}")
            if check_in.notes:
                print(f"      📝 {check_in.notes}")

    async def _fill_form(self) -> None:
        self.form.guest_name = await self._ask("Nombre del huésped*: ")
        self.form.room_number = await self._ask("Habitación*: ")
        self.form.check_in_date = await self._ask(f"Fecha de check-in* [{date.today().isoformat()}]: ") \
            or date.today().isoformat()
        self.form.check_out_date = await self._ask("Fecha de check-out (opcional): ")
        self.form.notes = await self._ask("Notas (opcional): ")

    async def submit_check_in(self) -> Optional[CheckIn]:
        """Valida el formulario, registra el check-in y limpia el formulario"""
        errors = self.form.validate()
        if errors:
            for error in errors:
                print(f"  ❌ {error}")
            return None

        check_in = await self.service.add_check_in(self.form.to_command())
        self.form.clear()

        if check_in is None:
            print("  ⚠️ No se pudo guardar el check-in. Inténtelo de nuevo.")
        else:
            print(f"  ✅ Check-in registrado: {check_in.get_stay_summary()}")
        return check_in

    async def show_recent(self) -> None:
        recent = await self.service.get_recent_check_ins(self.settings.recent_limit)
        self._print_check_ins("🕒 Check-ins recientes", recent)

    async def show_by_date(self, target: str) -> None:
        check_ins = await self.service.get_check_ins_by_date(target)
        check_ins.sort(key=lambda c: c.id, reverse=True)
        self._print_check_ins(f"📅 Check-ins del {target}", check_ins)

    async def run_interactive_mode(self) -> None:
        print("\n🏨 MOSTRADOR DE CHECK-IN (Ctrl+C para salir)\n" + "=" * 60)
        await self.show_recent()

        try:
            while True:
                print(MENU)
                option = await self._ask("Opción: ")

                if option == "1":
                    await self._fill_form()
                    if await self.submit_check_in():
                        await self.show_recent()
                elif option == "2":
                    await self.show_recent()
                elif option == "3":
                    target = await self._ask("Fecha (AAAA-MM-DD): ")
                    await self.show_by_date(target)
                elif option == "4":
                    await self.show_by_date(date.today().isoformat())
                elif option == "0":
                    break
                else:
                    print("  Opción no válida")
        except (KeyboardInterrupt, EOFError):
            pass

        print("\n👋 Hasta luego")

    async def run_demo_mode(self) -> None:
        """Registra un huésped de ejemplo y muestra los listados"""
        self.form = CheckInForm(guest_name="John Smith", room_number="101", check_in_date="2024-03-01")
        await self.submit_check_in()
        await self.show_by_date("2024-03-01")
        await self.show_recent()


async def main():
    load_dotenv()
    settings = Settings()
    app = HotelCheckInDeskApp(settings)

    try:
        await app.initialize()
        # Simple selector de modo
        mode = sys.argv[1] if len(sys.argv) > 1 else "interactive"
        if mode == "demo": await app.run_demo_mode()
        else: await app.run_interactive_mode()
    except Exception as e:
        logger.critical(f"Error fatal: {e}")

if __name__ == "__main__":
    asyncio.run(main())
