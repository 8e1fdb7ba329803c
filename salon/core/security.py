from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from salon.core.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from salon.core.roles import Capability, Role, can
from salon.dependencies import get_repository
from salon.models.profile import Profile
from salon.repositories.base import Repository


# =========================
# HASH DE SENHA
# =========================

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# =========================
# TOKEN JWT
# =========================

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/token")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})

    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def authenticate(repository: Repository, email: str, password: str) -> Optional[Profile]:
    profile = repository.get_profile_by_email(email)
    if not profile or not verify_password(password, profile.password_hash):
        return None
    return profile


# =========================
# USUÁRIO AUTENTICADO
# =========================

def get_current_user(
    token: str = Depends(oauth2_scheme),
    repository: Repository = Depends(get_repository),
) -> Profile:

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Não foi possível validar as credenciais",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str = payload.get("sub")

        if email is None:
            raise credentials_exception

    except JWTError:
        raise credentials_exception

    user = repository.get_profile_by_email(email)

    if user is None:
        raise credentials_exception

    return user


# =========================
# PERMISSÕES POR PAPEL
# =========================

def require(capability: Capability):
    """Dependência que só deixa passar papéis com a capacidade pedida."""

    def dependency(current_user: Profile = Depends(get_current_user)) -> Profile:
        if not can(current_user.role, capability):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Sem permissão",
            )
        return current_user

    return dependency


def is_own_schedule_only(user: Profile) -> bool:
    # profissional comum só enxerga a própria agenda
    return Role(user.role) == Role.STAFF
