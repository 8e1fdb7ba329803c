import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from salon.core.errors import NotFound, ValidationError
from salon.core.roles import Capability, Role
from salon.core.security import get_current_user, get_password_hash, require
from salon.dependencies import get_repository
from salon.models.profile import Profile, ProfileCreate, ProfileRead, ProfileUpdate, ProfileWithSkills
from salon.models.service import ServiceWithCategory
from salon.repositories.base import Repository
from salon.scheduling.availability import services_for_staff
from salon.serializers import profile_with_skills, service_with_category

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


def _check_categories(repository: Repository, category_ids: List[int]) -> None:
    known = {c.id for c in repository.list_categories()}
    unknown = [c for c in category_ids if c not in known]
    if unknown:
        raise ValidationError.for_field("skills", f"Categorias inexistentes: {unknown}")


def _get_or_404(repository: Repository, profile_id: int) -> Profile:
    profile = repository.get_profile(profile_id)
    if not profile:
        raise NotFound("Profile não encontrado")
    return profile


# só superadmin concede superadmin
def _check_role_grant(current_user: Profile, role: Role) -> None:
    if Role(role) == Role.SUPERADMIN and Role(current_user.role) != Role.SUPERADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Apenas superadmin pode conceder o papel superadmin",
        )


@router.get("", response_model=List[ProfileWithSkills])
def list_profiles(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_STAFF)),
):
    skills = repository.skills_by_profile()
    return [profile_with_skills(p, skills.get(p.id, ())) for p in repository.list_profiles()]


# equipe que aparece na agenda
@router.get("/staff", response_model=List[ProfileRead])
def list_staff_profiles(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(get_current_user),
):
    return [
        p for p in repository.list_profiles()
        if Role(p.role) in (Role.STAFF, Role.RECEPTION)
    ]


@router.get("/{profile_id}", response_model=ProfileWithSkills)
def get_profile(
    profile_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_STAFF)),
):
    profile = _get_or_404(repository, profile_id)
    return profile_with_skills(profile, repository.get_skills(profile.id))


# serviços que o profissional pode executar (visão da agenda)
@router.get("/{profile_id}/services", response_model=List[ServiceWithCategory])
def list_profile_services(
    profile_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(get_current_user),
):
    profile = _get_or_404(repository, profile_id)
    categories = {c.id: c for c in repository.list_categories()}
    services = services_for_staff(profile, repository.list_services(), repository.skills_by_profile())
    return [service_with_category(s, categories.get(s.category_id)) for s in services]


@router.post("", response_model=ProfileWithSkills, status_code=status.HTTP_201_CREATED)
def create_profile(
    payload: ProfileCreate,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_STAFF)),
):
    if repository.get_profile_by_email(payload.email):
        raise ValidationError.for_field("email", "Email já cadastrado")

    _check_role_grant(current_user, payload.role)
    _check_categories(repository, payload.skills)

    profile = Profile(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        role=payload.role,
        color_code=payload.color_code,
        password_hash=get_password_hash(payload.password),
    )
    profile = repository.save_profile(profile)

    if payload.skills:
        repository.set_skills(profile.id, payload.skills)

    logger.info("Profile %s criado (%s) por %s", profile.id, profile.role, current_user.id)
    return profile_with_skills(profile, repository.get_skills(profile.id))


@router.patch("/{profile_id}", response_model=ProfileWithSkills)
def update_profile(
    profile_id: int,
    payload: ProfileUpdate,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_STAFF)),
):
    profile = _get_or_404(repository, profile_id)
    updates = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    skills = updates.pop("skills", None)
    password = updates.pop("password", None)

    if "role" in updates:
        _check_role_grant(current_user, updates["role"])

    if "email" in updates and updates["email"] != profile.email:
        if repository.get_profile_by_email(updates["email"]):
            raise ValidationError.for_field("email", "Email já cadastrado")

    if skills is not None:
        _check_categories(repository, skills)

    profile.sqlmodel_update(updates)
    if password:
        profile.password_hash = get_password_hash(password)
    profile = repository.save_profile(profile)

    if skills is not None:
        repository.set_skills(profile.id, skills)

    return profile_with_skills(profile, repository.get_skills(profile.id))


@router.delete("/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_profile(
    profile_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_STAFF)),
):
    profile = _get_or_404(repository, profile_id)
    repository.delete_profile(profile)
    logger.info("Profile %s removido por %s", profile_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
