import os
import warnings
from pathlib import Path

from dotenv import load_dotenv

# .env na raiz do projeto
env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# =========================
# BANCO
# =========================

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./salon.db")


# =========================
# JWT
# =========================

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    warnings.warn(
        "SECRET_KEY não definido! Usando chave insegura de desenvolvimento", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105

ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "480"))


# =========================
# LOGS / HTTP
# =========================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


# =========================
# REGRAS DE AGENDA
# desligadas por padrão: o salão sempre aceitou qualquer status e horários sobrepostos
# =========================

STRICT_STATUS_TRANSITIONS = _flag("STRICT_STATUS_TRANSITIONS")
REJECT_OVERLAPPING_APPOINTMENTS = _flag("REJECT_OVERLAPPING_APPOINTMENTS")
ENFORCE_STAFF_SKILLS = _flag("ENFORCE_STAFF_SKILLS")
