from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from salon.core.roles import Capability
from salon.core.security import is_own_schedule_only, require
from salon.dependencies import get_ledger, get_repository
from salon.models.appointment import (
    AppointmentCreate,
    AppointmentDetails,
    AppointmentRead,
    AppointmentStatusUpdate,
)
from salon.models.profile import Profile
from salon.repositories.base import Repository
from salon.scheduling.ledger import AppointmentLedger
from salon.serializers import appointments_with_details


router = APIRouter(prefix="/api/appointments", tags=["appointments"])


# =========================
# LISTAR AGENDAMENTOS
# - recepção/admin: todos, ou de um profissional com ?staff=
# - profissional: só os da agenda dele
# =========================
@router.get("", response_model=List[AppointmentDetails])
def list_appointments(
    staff: Optional[int] = Query(default=None),
    repository: Repository = Depends(get_repository),
    ledger: AppointmentLedger = Depends(get_ledger),
    current_user: Profile = Depends(require(Capability.MANAGE_OWN_SCHEDULE)),
):
    if is_own_schedule_only(current_user):
        staff = current_user.id

    return appointments_with_details(repository, ledger.list_appointments(staff_id=staff))


@router.get("/{appointment_id}", response_model=AppointmentDetails)
def get_appointment(
    appointment_id: int,
    repository: Repository = Depends(get_repository),
    ledger: AppointmentLedger = Depends(get_ledger),
    current_user: Profile = Depends(require(Capability.MANAGE_OWN_SCHEDULE)),
):
    appt = ledger.get(appointment_id)
    _check_owner(current_user, appt.staff_id)
    return appointments_with_details(repository, [appt])[0]


# =========================
# CRIAR AGENDAMENTO (RECEPÇÃO)
# end_time sempre calculado pela duração do serviço
# =========================
@router.post("", response_model=AppointmentRead, status_code=status.HTTP_201_CREATED)
def create_appointment(
    payload: AppointmentCreate,
    ledger: AppointmentLedger = Depends(get_ledger),
    current_user: Profile = Depends(require(Capability.MANAGE_CALENDAR)),
):
    return ledger.book(payload)


# =========================
# MUDAR STATUS
# =========================
@router.patch("/{appointment_id}/status", response_model=AppointmentRead)
def update_appointment_status(
    appointment_id: int,
    payload: AppointmentStatusUpdate,
    ledger: AppointmentLedger = Depends(get_ledger),
    current_user: Profile = Depends(require(Capability.MANAGE_OWN_SCHEDULE)),
):
    appt = ledger.get(appointment_id)
    _check_owner(current_user, appt.staff_id)
    return ledger.change_status(appointment_id, payload.status)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appointment(
    appointment_id: int,
    ledger: AppointmentLedger = Depends(get_ledger),
    current_user: Profile = Depends(require(Capability.MANAGE_CALENDAR)),
):
    ledger.delete(appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _check_owner(current_user: Profile, staff_id: int) -> None:
    if is_own_schedule_only(current_user) and staff_id != current_user.id:
        raise HTTPException(status_code=403, detail="Sem permissão")
