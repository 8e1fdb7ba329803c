from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import SQLModel

from salon.core.security import authenticate, create_access_token, get_current_user
from salon.dependencies import get_repository
from salon.models.profile import Profile, ProfileWithSkills
from salon.repositories.base import Repository
from salon.serializers import profile_with_skills

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(SQLModel):
    email: str
    password: str


class LoginResponse(SQLModel):
    user: ProfileWithSkills
    access_token: str
    token_type: str = "bearer"


def _invalid_credentials() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Email ou senha inválidos",
    )


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    repository: Repository = Depends(get_repository),
):
    user = authenticate(repository, credentials.email, credentials.password)
    if not user:
        raise _invalid_credentials()

    return LoginResponse(
        user=profile_with_skills(user, repository.get_skills(user.id)),
        access_token=create_access_token(data={"sub": user.email}),
    )


# formulário OAuth2 (botão "Authorize" do /docs)
@router.post("/token")
def login_form(
    form_data: OAuth2PasswordRequestForm = Depends(),
    repository: Repository = Depends(get_repository),
):
    user = authenticate(repository, form_data.username, form_data.password)
    if not user:
        raise _invalid_credentials()

    return {
        "access_token": create_access_token(data={"sub": user.email}),
        "token_type": "bearer"
    }


@router.get("/me", response_model=ProfileWithSkills)
def me(
    current_user: Profile = Depends(get_current_user),
    repository: Repository = Depends(get_repository),
):
    return profile_with_skills(current_user, repository.get_skills(current_user.id))
