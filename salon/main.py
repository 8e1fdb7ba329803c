import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salon.core.config import CORS_ORIGINS, LOG_LEVEL
from salon.core.errors import SalonError, SchedulingConflict, ValidationError
from salon.database import create_db_and_tables
from salon.routers import appointments
from salon.routers import auth
from salon.routers import clients
from salon.routers import dashboard
from salon.routers import profiles
from salon.routers import service_categories, services, staff_skills

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Salon Agendamento API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(profiles.router)
app.include_router(staff_skills.router)
app.include_router(service_categories.router)
app.include_router(services.router)
app.include_router(clients.router)
app.include_router(appointments.router)
app.include_router(dashboard.router)


# =========================
# ERROS
# =========================

def _field_name(loc) -> str:
    # descarta o prefixo "body"/"query"/"path"
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [{"field": _field_name(e.get("loc", ())), "message": e.get("msg", "")} for e in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Dados inválidos", "errors": errors},
    )


@app.exception_handler(SalonError)
async def salon_error_handler(request: Request, exc: SalonError):
    content = {"detail": exc.detail}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    elif isinstance(exc, SchedulingConflict):
        content["conflicting_ids"] = exc.conflicting_ids
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Erro não tratado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erro interno do servidor"},
    )


@app.on_event("startup")
def on_startup():
    create_db_and_tables()


@app.get("/")
def root():
    return {"message": "API do salão funcionando 🚀"}
