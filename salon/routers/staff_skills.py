from typing import List

from fastapi import APIRouter, Depends

from salon.core.security import get_current_user
from salon.dependencies import get_repository
from salon.models.profile import Profile
from salon.models.staff_skill import StaffSkill
from salon.repositories.base import Repository

router = APIRouter(prefix="/api/staff-skills", tags=["staff-skills"])


@router.get("", response_model=List[StaffSkill])
def list_staff_skills(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(get_current_user),
):
    return repository.list_skills()
