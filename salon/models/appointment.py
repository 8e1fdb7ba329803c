from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import field_validator
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from salon.models.client import ClientRead
from salon.models.profile import ProfileRead
from salon.models.service import ServiceWithCategory


class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Appointment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # sem FK: cliente/serviço podem ser apagados sem levar o histórico junto
    client_id: int = Field(index=True)
    staff_id: int = Field(index=True)
    service_id: int = Field(index=True)

    # DateTime sem fuso: horário local do salão
    start_time: datetime = Field(index=True, sa_type=DateTime())
    # start_time + duração do serviço no momento da criação
    end_time: datetime = Field(sa_type=DateTime())

    status: AppointmentStatus = Field(default=AppointmentStatus.PENDING, index=True)

    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime())


class AppointmentCreate(SQLModel):
    client_id: int
    staff_id: int
    service_id: int
    start_time: datetime

    @field_validator("start_time")
    @classmethod
    def to_local_naive(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value


class AppointmentStatusUpdate(SQLModel):
    status: AppointmentStatus


class AppointmentRead(SQLModel):
    id: int
    client_id: int
    staff_id: int
    service_id: int
    start_time: datetime
    end_time: datetime
    status: AppointmentStatus
    created_at: Optional[datetime] = None


class AppointmentDetails(AppointmentRead):
    client: Optional[ClientRead] = None
    staff: Optional[ProfileRead] = None
    service: Optional[ServiceWithCategory] = None
