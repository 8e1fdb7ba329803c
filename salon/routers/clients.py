from typing import List

from fastapi import APIRouter, Depends, Response, status

from salon.core.errors import NotFound
from salon.core.roles import Capability
from salon.core.security import require
from salon.dependencies import get_ledger, get_repository
from salon.models.appointment import AppointmentDetails
from salon.models.client import Client, ClientCreate, ClientRead, ClientUpdate
from salon.models.profile import Profile
from salon.repositories.base import Repository
from salon.scheduling.ledger import AppointmentLedger
from salon.serializers import appointments_with_details

router = APIRouter(prefix="/api/clients", tags=["clients"])

REQUIRED_FIELDS = ("full_name", "phone")


def _get_or_404(repository: Repository, client_id: int) -> Client:
    client = repository.get_client(client_id)
    if not client:
        raise NotFound("Cliente não encontrado")
    return client


@router.get("", response_model=List[ClientRead])
def list_clients(
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CLIENTS)),
):
    return repository.list_clients()


@router.get("/{client_id}", response_model=ClientRead)
def get_client(
    client_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CLIENTS)),
):
    return _get_or_404(repository, client_id)


# histórico do cliente
@router.get("/{client_id}/appointments", response_model=List[AppointmentDetails])
def list_client_appointments(
    client_id: int,
    repository: Repository = Depends(get_repository),
    ledger: AppointmentLedger = Depends(get_ledger),
    current_user: Profile = Depends(require(Capability.MANAGE_CLIENTS)),
):
    return appointments_with_details(repository, ledger.list_for_client(client_id))


@router.post("", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
def create_client(
    payload: ClientCreate,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CLIENTS)),
):
    return repository.save_client(Client.model_validate(payload))


@router.patch("/{client_id}", response_model=ClientRead)
def update_client(
    client_id: int,
    payload: ClientUpdate,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CLIENTS)),
):
    client = _get_or_404(repository, client_id)
    updates = {
        k: v for k, v in payload.model_dump(exclude_unset=True).items()
        if v is not None or k not in REQUIRED_FIELDS
    }
    client.sqlmodel_update(updates)
    return repository.save_client(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(
    client_id: int,
    repository: Repository = Depends(get_repository),
    current_user: Profile = Depends(require(Capability.MANAGE_CLIENTS)),
):
    client = _get_or_404(repository, client_id)
    repository.delete_client(client)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
