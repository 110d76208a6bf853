from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import get_settings
from .db import close_db
from .errors import register_exception_handlers
from .logger import PetLogger
from .middleware.rate_limit import install_rate_limit, log_requests
from .routers import pets
import logging

settings = get_settings()

# Configurar logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    PetLogger("petcare").banner(f"{settings.app_name} ({settings.env})")
    yield
    logger.info("Closing MongoDB connection...")
    close_db()


app = FastAPI(title=settings.app_name, lifespan=lifespan)
register_exception_handlers(app)
install_rate_limit(app, settings)
app.middleware("http")(log_requests)

# Configuración de CORS según entorno
if settings.env == "dev":
    # Desarrollo: más permisivo para facilitar desarrollo
    cors_origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    cors_regex = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"
else:
    # Producción: restrictivo - solo orígenes específicos
    frontend_url = settings.frontend_base_url
    cors_origins = [frontend_url] if frontend_url else []
    cors_regex = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=cors_regex,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    expose_headers=["Content-Type"],
)

@app.get("/health")
async def health():
    return {"status": "ok"}

# Routers
app.include_router(pets.router, prefix="/pets", tags=["pets"])
