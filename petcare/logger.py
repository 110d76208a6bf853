"""
Logger de la API: niveles info/warn/error/success/debug sobre logging estándar.

Se inyecta en los routers con Depends(get_pet_logger) para poder sustituirlo en tests.
"""
import json
import logging
from typing import Any, Optional

from .config import get_settings

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")


def format_meta(meta: Any) -> str:
    if meta is None:
        return ""
    serialized = meta if isinstance(meta, str) else json.dumps(meta, indent=2, default=str)
    return "\n    -> " + "\n    -> ".join(serialized.split("\n"))


class PetLogger:
    def __init__(self, name: str = "petcare", debug_enabled: bool = True):
        self._logger = logging.getLogger(name)
        self.debug_enabled = debug_enabled

    def _log(self, level: int, message: str, meta: Any = None) -> None:
        self._logger.log(level, "%s%s", message, format_meta(meta))

    def info(self, message: str, meta: Any = None) -> None:
        self._log(logging.INFO, message, meta)

    def warn(self, message: str, meta: Any = None) -> None:
        self._log(logging.WARNING, message, meta)

    def error(self, message: str, meta: Any = None) -> None:
        self._log(logging.ERROR, message, meta)

    def success(self, message: str, meta: Any = None) -> None:
        self._log(SUCCESS, message, meta)

    def debug(self, message: str, meta: Any = None) -> None:
        # en producción no se emiten trazas de debug
        if not self.debug_enabled:
            return
        self._log(logging.DEBUG, message, meta)

    def banner(self, message: str) -> None:
        line = "=" * (len(message) + 8)
        self._logger.info("%s\n==  %s  ==\n%s", line, message, line)


_pet_logger: Optional[PetLogger] = None

def get_pet_logger() -> PetLogger:
    global _pet_logger
    if _pet_logger is None:
        _pet_logger = PetLogger("petcare.pets", debug_enabled=not get_settings().is_production)
    return _pet_logger
