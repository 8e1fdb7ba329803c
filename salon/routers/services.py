import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from salon.core.errors import NotFound, ValidationError
from salon.core.roles import Capability
from salon.core.security import get_current_user, require
from salon.dependencies import get_repository
from salon.models.profile import Profile, ProfileRead
from salon.models.service import Service, ServiceCreate, ServiceRead, ServiceUpdate, ServiceWithCategory
from salon.repositories.base import Repository
from salon.scheduling.availability import eligible_staff
from salon.serializers import service_with_category

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/services",
    tags=["services"]
)


def _get_or_404(repository: Repository, service_id: int) -> Service:
    service = repository.get_service(service_id)
    if not service:
        raise NotFound("Serviço não encontrado")
    return service


def _check_category(repository: Repository, category_id: int) -> None:
    if not repository.get_category(category_id):
        raise ValidationError.for_field("category_id", "Categoria não encontrada")


@router.get("", response_model=List[ServiceWithCategory])
def list_services(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(get_current_user),
):
    categories = {c.id: c for c in repository.list_categories()}
    return [
        service_with_category(s, categories.get(s.category_id))
        for s in repository.list_services()
    ]


@router.get("/{service_id}", response_model=ServiceWithCategory)
def get_service(
    service_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(get_current_user),
):
    service = _get_or_404(repository, service_id)
    return service_with_category(service, repository.get_category(service.category_id))


# quem pode executar o serviço (habilidade na categoria ou admin)
@router.get("/{service_id}/eligible-staff", response_model=List[ProfileRead])
def list_eligible_staff(
    service_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(get_current_user),
):
    service = _get_or_404(repository, service_id)
    return eligible_staff(service, repository.list_profiles(), repository.skills_by_profile())


@router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
def create_service(
    payload: ServiceCreate,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CATALOG)),
):
    _check_category(repository, payload.category_id)

    service = repository.save_service(Service.model_validate(payload))
    logger.info("Serviço %s criado: %s (%s DA, %s min)", service.id, service.name, service.price, service.duration)
    return service


@router.patch("/{service_id}", response_model=ServiceRead)
def update_service(
    service_id: int,
    payload: ServiceUpdate,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CATALOG)),
):
    service = _get_or_404(repository, service_id)
    updates = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}

    if "category_id" in updates:
        _check_category(repository, updates["category_id"])

    # agendamentos existentes mantêm o end_time calculado na criação
    service.sqlmodel_update(updates)
    return repository.save_service(service)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(
    service_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CATALOG)),
):
    service = _get_or_404(repository, service_id)
    repository.delete_service(service)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
