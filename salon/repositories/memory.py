import itertools
from collections import defaultdict
from typing import Dict, List, Optional, Set, Tuple

from salon.models.appointment import Appointment
from salon.models.client import Client
from salon.models.profile import Profile
from salon.models.service import Service
from salon.models.service_category import ServiceCategory
from salon.models.staff_skill import StaffSkill
from salon.repositories.base import Repository


class InMemoryRepository(Repository):
    """Repositório em dicionários, sem banco. Usado nos testes do núcleo de agenda."""

    def __init__(self):
        self._rows: Dict[type, Dict[int, object]] = defaultdict(dict)
        self._ids: Dict[type, itertools.count] = defaultdict(lambda: itertools.count(1))
        self._skills: Set[Tuple[int, int]] = set()

    def _save(self, obj):
        if obj.id is None:
            obj.id = next(self._ids[type(obj)])
        self._rows[type(obj)][obj.id] = obj
        return obj

    def _all(self, model) -> list:
        return sorted(self._rows[model].values(), key=lambda o: o.id)

    def _get(self, model, obj_id: int):
        return self._rows[model].get(obj_id)

    def _delete(self, obj) -> None:
        self._rows[type(obj)].pop(obj.id, None)

    # profiles

    def list_profiles(self) -> List[Profile]:
        return self._all(Profile)

    def get_profile(self, profile_id: int) -> Optional[Profile]:
        return self._get(Profile, profile_id)

    def get_profile_by_email(self, email: str) -> Optional[Profile]:
        return next((p for p in self._all(Profile) if p.email == email), None)

    def save_profile(self, profile: Profile) -> Profile:
        return self._save(profile)

    def delete_profile(self, profile: Profile) -> None:
        self._skills = {s for s in self._skills if s[0] != profile.id}
        self._delete(profile)

    # skills

    def list_skills(self) -> List[StaffSkill]:
        return [StaffSkill(profile_id=p, category_id=c) for p, c in sorted(self._skills)]

    def set_skills(self, profile_id: int, category_ids: List[int]) -> None:
        self._skills = {s for s in self._skills if s[0] != profile_id}
        self._skills.update((profile_id, c) for c in category_ids)

    # categorias

    def list_categories(self) -> List[ServiceCategory]:
        return self._all(ServiceCategory)

    def get_category(self, category_id: int) -> Optional[ServiceCategory]:
        return self._get(ServiceCategory, category_id)

    def save_category(self, category: ServiceCategory) -> ServiceCategory:
        return self._save(category)

    # serviços

    def list_services(self) -> List[Service]:
        return self._all(Service)

    def get_service(self, service_id: int) -> Optional[Service]:
        return self._get(Service, service_id)

    def save_service(self, service: Service) -> Service:
        return self._save(service)

    def delete_service(self, service: Service) -> None:
        self._delete(service)

    # clientes

    def list_clients(self) -> List[Client]:
        return self._all(Client)

    def get_client(self, client_id: int) -> Optional[Client]:
        return self._get(Client, client_id)

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
        appts = [
            a for a in self._all(Appointment)
            if (staff_id is None or a.staff_id == staff_id)
            and (client_id is None or a.client_id == client_id)
        ]
        return sorted(appts, key=lambda a: (a.start_time, a.id))

    def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        return self._get(Appointment, appointment_id)

    def save_appointment(self, appointment: Appointment) -> Appointment:
        return self._save(appointment)

    def delete_appointment(self, appointment: Appointment) -> None:
        self._delete(appointment)
