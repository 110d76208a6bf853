from pydantic import BaseModel
from typing import Optional
import os
from dotenv import load_dotenv
load_dotenv()  # carga el archivo .env de la raíz

def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")

class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "PetCare API")
    env: str = os.getenv("APP_ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # MongoDB
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("MONGODB_DB_NAME", "petcare")
    mongodb_user: Optional[str] = os.getenv("MONGODB_USER") or None
    mongodb_pass: Optional[str] = os.getenv("MONGODB_PASS") or None
    mongodb_auth_source: Optional[str] = os.getenv("MONGODB_AUTH_SOURCE") or None
    mongodb_replica_set: Optional[str] = os.getenv("MONGODB_REPLICA_SET") or None
    mongodb_tls: bool = _env_flag("MONGODB_TLS")
    server_selection_timeout_ms: int = int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "5000"))

    frontend_base_url: str = os.getenv("FRONTEND_BASE_URL", "http://localhost:5173")
    rate_limit: str = os.getenv("RATE_LIMIT", "100/minute")
    rate_limit_enabled: bool = _env_flag("RATE_LIMIT_ENABLED", "true")

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    def mongo_client_options(self) -> dict:
        """
        Opciones extra para AsyncIOMotorClient.
        Solo se incluyen las que están definidas en el entorno.
        """
        options: dict = {
            "serverSelectionTimeoutMS": self.server_selection_timeout_ms,
            "tz_aware": True,
        }
        if self.mongodb_user and self.mongodb_pass:
            options["username"] = self.mongodb_user
            options["password"] = self.mongodb_pass
        if self.mongodb_auth_source:
            options["authSource"] = self.mongodb_auth_source
        if self.mongodb_replica_set:
            options["replicaSet"] = self.mongodb_replica_set
        if self.mongodb_tls:
            options["tls"] = True
        return options


_settings: Settings | None = None
def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
