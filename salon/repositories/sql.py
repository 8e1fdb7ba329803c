import logging
from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import Session, select

from salon.models.appointment import Appointment
from salon.models.client import Client
from salon.models.profile import Profile
from salon.models.service import Service
from salon.models.service_category import ServiceCategory
from salon.models.staff_skill import StaffSkill
from salon.repositories.base import Repository

logger = logging.getLogger(__name__)


class SqlRepository(Repository):
    def __init__(self, session: Session):
        self.session = session

    def _save(self, obj):
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def _delete(self, obj) -> None:
        self.session.delete(obj)
        self.session.commit()

    # profiles

    def list_profiles(self) -> List[Profile]:
        return list(self.session.exec(select(Profile).order_by(Profile.id)).all())

    def get_profile(self, profile_id: int) -> Optional[Profile]:
        return self.session.get(Profile, profile_id)

    def get_profile_by_email(self, email: str) -> Optional[Profile]:
        return self.session.exec(select(Profile).where(Profile.email == email)).first()

    def save_profile(self, profile: Profile) -> Profile:
        return self._save(profile)

    def delete_profile(self, profile: Profile) -> None:
        self.session.exec(delete(StaffSkill).where(StaffSkill.profile_id == profile.id))
        self._delete(profile)

    # skills

    def list_skills(self) -> List[StaffSkill]:
        return list(self.session.exec(select(StaffSkill)).all())

    def get_skills(self, profile_id: int) -> List[int]:
        return list(
            self.session.exec(
                select(StaffSkill.category_id).where(StaffSkill.profile_id == profile_id)
            ).all()
        )

    def set_skills(self, profile_id: int, category_ids: List[int]) -> None:
        self.session.exec(delete(StaffSkill).where(StaffSkill.profile_id == profile_id))
        for category_id in dict.fromkeys(category_ids):
            self.session.add(StaffSkill(profile_id=profile_id, category_id=category_id))
        self.session.commit()
        logger.debug("Habilidades do profile %s: %s", profile_id, category_ids)

    # categorias

    def list_categories(self) -> List[ServiceCategory]:
        return list(self.session.exec(select(ServiceCategory).order_by(ServiceCategory.id)).all())

    def get_category(self, category_id: int) -> Optional[ServiceCategory]:
        return self.session.get(ServiceCategory, category_id)

    def get_category_by_name(self, name: str) -> Optional[ServiceCategory]:
        return self.session.exec(select(ServiceCategory).where(ServiceCategory.name == name)).first()

    def save_category(self, category: ServiceCategory) -> ServiceCategory:
        return self._save(category)

    # serviços

    def list_services(self) -> List[Service]:
        return list(self.session.exec(select(Service).order_by(Service.id)).all())

    def get_service(self, service_id: int) -> Optional[Service]:
        return self.session.get(Service, service_id)

    def save_service(self, service: Service) -> Service:
        return self._save(service)

    def delete_service(self, service: Service) -> None:
        self._delete(service)

    # clientes

    def list_clients(self) -> List[Client]:
        return list(self.session.exec(select(Client).order_by(Client.id)).all())

    def get_client(self, client_id: int) -> Optional[Client]:
        return self.session.get(Client, client_id)

    def save_client(self, client: Client) -> Client:
        return self._save(client)

    def delete_client(self, client: Client) -> None:
        self._delete(client)

    # agendamentos

    def list_appointments(
        self,
        staff_id: Optional[int] = None,
        client_id: Optional[int] = None,
    ) -> List[Appointment]:
        query = select(Appointment)
        if staff_id is not None:
            query = query.where(Appointment.staff_id == staff_id)
        if client_id is not None:
            query = query.where(Appointment.client_id == client_id)
        return list(self.session.exec(query.order_by(Appointment.start_time, Appointment.id)).all())

    def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        return self.session.get(Appointment, appointment_id)

    def save_appointment(self, appointment: Appointment) -> Appointment:
        return self._save(appointment)

    def delete_appointment(self, appointment: Appointment) -> None:
        self._delete(appointment)
