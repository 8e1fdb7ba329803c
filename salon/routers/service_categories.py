from typing import List

from fastapi import APIRouter, Depends, status

from salon.core.errors import ValidationError
from salon.core.roles import Capability
from salon.core.security import get_current_user, require
from salon.dependencies import get_repository
from salon.models.profile import Profile
from salon.models.service_category import ServiceCategory, ServiceCategoryCreate, ServiceCategoryRead
from salon.repositories.base import Repository

router = APIRouter(prefix="/api/service-categories", tags=["service-categories"])


@router.get("", response_model=List[ServiceCategoryRead])
def list_categories(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(get_current_user),
):
    return repository.list_categories()


@router.post("", response_model=ServiceCategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: ServiceCategoryCreate,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CATALOG)),
):
    if repository.get_category_by_name(payload.name):
        raise ValidationError.for_field("name", "Categoria já cadastrada")

    return repository.save_category(ServiceCategory(name=payload.name))
