from fastapi import Depends
from sqlmodel import Session

from salon.database import get_session
from salon.repositories.base import Repository
from salon.repositories.sql import SqlRepository
from salon.scheduling.ledger import AppointmentLedger, SchedulingPolicy


def get_repository(session: Session = Depends(get_session)) -> Repository:
    return SqlRepository(session)


def get_scheduling_policy() -> SchedulingPolicy:
    return SchedulingPolicy.from_config()


def get_ledger(
    repository: Repository = Depends(get_repository),
    policy: SchedulingPolicy = Depends(get_scheduling_policy),
) -> AppointmentLedger:
    return AppointmentLedger(repository, policy)
