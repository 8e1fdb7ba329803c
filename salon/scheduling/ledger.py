import logging
from dataclasses import dataclass
from typing import List, Optional

from salon.core import config
from salon.core.errors import NotFound, SchedulingConflict, ValidationError
from salon.models.appointment import Appointment, AppointmentCreate, AppointmentStatus
from salon.repositories.base import Repository
from salon.scheduling.availability import is_qualified
from salon.scheduling.validator import check_transition, compute_end_time, find_conflicts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulingPolicy:
    """Regras opcionais da agenda. Tudo desligado = comportamento histórico do salão."""

    strict_status_transitions: bool = False
    reject_overlaps: bool = False
    enforce_staff_skills: bool = False

    @classmethod
    def from_config(cls) -> "SchedulingPolicy":
        return cls(
            strict_status_transitions=config.STRICT_STATUS_TRANSITIONS,
            reject_overlaps=config.REJECT_OVERLAPPING_APPOINTMENTS,
            enforce_staff_skills=config.ENFORCE_STAFF_SKILLS,
        )


class AppointmentLedger:
    def __init__(self, repository: Repository, policy: Optional[SchedulingPolicy] = None):
        self.repository = repository
        self.policy = policy or SchedulingPolicy()

    def get(self, appointment_id: int) -> Appointment:
        appt = self.repository.get_appointment(appointment_id)
        if not appt:
            raise NotFound("Agendamento não encontrado")
        return appt

    def list_appointments(self, staff_id: Optional[int] = None) -> List[Appointment]:
        return self.repository.list_appointments(staff_id=staff_id)

    def list_for_client(self, client_id: int) -> List[Appointment]:
        if not self.repository.get_client(client_id):
            raise NotFound("Cliente não encontrado")
        return self.repository.list_appointments(client_id=client_id)

    # =========================
    # CRIAR
    # =========================

    def book(self, data: AppointmentCreate) -> Appointment:
        client = self.repository.get_client(data.client_id)
        if not client:
            raise NotFound("Cliente não encontrado")

        staff = self.repository.get_profile(data.staff_id)
        if not staff:
            raise NotFound("Profissional não encontrado")

        service = self.repository.get_service(data.service_id)
        if not service:
            raise NotFound("Serviço não encontrado")

        start_time = data.start_time
        end_time = compute_end_time(start_time, service)

        if self.policy.enforce_staff_skills:
            skills = set(self.repository.get_skills(staff.id))
            if not is_qualified(staff, service.category_id, skills):
                raise ValidationError.for_field(
                    "staff_id", "Profissional não habilitado para a categoria do serviço"
                )

        if self.policy.reject_overlaps:
            conflicts = find_conflicts(
                staff.id, start_time, end_time, self.repository.list_appointments(staff_id=staff.id)
            )
            if conflicts:
                raise SchedulingConflict(
                    "Horário indisponível para este profissional",
                    conflicting_ids=[a.id for a in conflicts],
                )

        appt = Appointment(
            client_id=client.id,
            staff_id=staff.id,
            service_id=service.id,
            start_time=start_time,
            end_time=end_time,
            status=AppointmentStatus.PENDING,
        )
        appt = self.repository.save_appointment(appt)
        logger.info(
            "Agendamento %s criado: staff=%s service=%s %s-%s",
            appt.id, staff.id, service.id, start_time.isoformat(), end_time.isoformat(),
        )
        return appt

    # =========================
    # STATUS
    # =========================

    def change_status(self, appointment_id: int, status: AppointmentStatus) -> Appointment:
        appt = self.get(appointment_id)
        status = AppointmentStatus(status)

        if self.policy.strict_status_transitions:
            check_transition(appt.status, status)

        previous = AppointmentStatus(appt.status)
        appt.status = status
        appt = self.repository.save_appointment(appt)
        logger.info("Agendamento %s: %s -> %s", appt.id, previous.value, status.value)
        return appt

    # =========================
    # REMOVER (hard delete)
    # =========================

    def delete(self, appointment_id: int) -> None:
        appt = self.get(appointment_id)
        self.repository.delete_appointment(appt)
        logger.info("Agendamento %s removido", appointment_id)
