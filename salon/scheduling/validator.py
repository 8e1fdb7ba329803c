from datetime import datetime, timedelta
from typing import Dict, FrozenSet, Iterable, List

from salon.core.errors import InvalidTransition
from salon.models.appointment import Appointment, AppointmentStatus
from salon.models.service import Service


# grafo usado pela agenda: terminado e cancelado não saem mais do lugar
ALLOWED_TRANSITIONS: Dict[AppointmentStatus, FrozenSet[AppointmentStatus]] = {
    AppointmentStatus.PENDING: frozenset({AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.CONFIRMED: frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
}


def compute_end_time(start_time: datetime, service: Service) -> datetime:
    return start_time + timedelta(minutes=service.duration)


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """Retorna True se [a_start, a_end) sobrepõe [b_start, b_end)."""
    return a_start < b_end and a_end > b_start


def find_conflicts(
    staff_id: int,
    start_time: datetime,
    end_time: datetime,
    existing: Iterable[Appointment],
) -> List[Appointment]:
    # cancelados não ocupam a agenda
    return [
        a for a in existing
        if a.staff_id == staff_id
        and a.status != AppointmentStatus.CANCELLED
        and overlaps(start_time, end_time, a.start_time, a.end_time)
    ]


def can_transition(current: AppointmentStatus, new: AppointmentStatus) -> bool:
    current, new = AppointmentStatus(current), AppointmentStatus(new)
    return current == new or new in ALLOWED_TRANSITIONS[current]


def check_transition(current: AppointmentStatus, new: AppointmentStatus) -> None:
    if not can_transition(current, new):
        raise InvalidTransition(AppointmentStatus(current).value, AppointmentStatus(new).value)
