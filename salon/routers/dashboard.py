from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends

from salon.core.roles import Capability
from salon.core.security import require
from salon.dependencies import get_repository
from salon.models.dashboard import DashboardKPIs, GoldenClient, TopEmployee, TopService
from salon.models.profile import Profile
from salon.repositories.base import Repository
from salon.scheduling import aggregation


router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _services(repository: Repository):
    return {s.id: s for s in repository.list_services()}


@router.get("/kpis", response_model=DashboardKPIs)
def dashboard_kpis(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.VIEW_DASHBOARD)),
):
    return aggregation.compute_kpis(
        repository.list_appointments(), _services(repository), now=datetime.now()
    )


@router.get("/top-employees", response_model=List[TopEmployee])
def dashboard_top_employees(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.VIEW_DASHBOARD)),
):
    profiles = {p.id: p for p in repository.list_profiles()}
    return aggregation.top_employees(
        repository.list_appointments(), _services(repository), profiles, now=datetime.now()
    )


@router.get("/top-services", response_model=List[TopService])
def dashboard_top_services(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.VIEW_DASHBOARD)),
):
    categories = {c.id: c for c in repository.list_categories()}
    return aggregation.top_services(
        repository.list_appointments(), _services(repository), categories, now=datetime.now()
    )


# cliente que mais gastou no mês (null se ninguém concluiu atendimento)
@router.get("/golden-client", response_model=Optional[GoldenClient])
def dashboard_golden_client(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.VIEW_DASHBOARD)),
):
    clients = {c.id: c for c in repository.list_clients()}
    return aggregation.golden_client(
        repository.list_appointments(), _services(repository), clients, now=datetime.now()
    )
