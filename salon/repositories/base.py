from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Set

from salon.models.appointment import Appointment
from salon.models.client import Client
from salon.models.profile import Profile
from salon.models.service import Service
from salon.models.service_category import ServiceCategory
from salon.models.staff_skill import StaffSkill
from salon.scheduling.availability import skills_by_profile


class Repository(ABC):
    """Contrato de persistência do salão.

    As rotas e o núcleo de agenda só conversam com esta interface; o banco
    (SqlRepository) ou a memória (InMemoryRepository) ficam atrás dela.
    Métodos ``save_*`` inserem ou atualizam e devolvem o objeto com id.
    """

    # =========================
    # PROFILES
    # =========================

    @abstractmethod
    def list_profiles(self) -> List[Profile]: ...

    @abstractmethod
    def get_profile(self, profile_id: int) -> Optional[Profile]: ...

    @abstractmethod
    def get_profile_by_email(self, email: str) -> Optional[Profile]: ...

    @abstractmethod
    def save_profile(self, profile: Profile) -> Profile: ...

    @abstractmethod
    def delete_profile(self, profile: Profile) -> None:
        """Remove o profile e as habilidades dele."""

    # =========================
    # STAFF SKILLS
    # =========================

    @abstractmethod
    def list_skills(self) -> List[StaffSkill]: ...

    @abstractmethod
    def set_skills(self, profile_id: int, category_ids: List[int]) -> None:
        """Substitui o conjunto de categorias do profile."""

    def get_skills(self, profile_id: int) -> List[int]:
        return [s.category_id for s in self.list_skills() if s.profile_id == profile_id]

    def skills_by_profile(self) -> Dict[int, Set[int]]:
        return skills_by_profile(self.list_skills())

    # =========================
    # CATEGORIAS
    # =========================

    @abstractmethod
    def list_categories(self) -> List[ServiceCategory]: ...

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[ServiceCategory]: ...

    @abstractmethod
    def save_category(self, category: ServiceCategory) -> ServiceCategory: ...

    def get_category_by_name(self, name: str) -> Optional[ServiceCategory]:
        for category in self.list_categories():
            if category.name == name:
                return category
        return None

    # =========================
    # SERVIÇOS
    # =========================

    @abstractmethod
    def list_services(self) -> List[Service]: ...

    @abstractmethod
    def get_service(self, service_id: int) -> Optional[Service]: ...

    @abstractmethod
    def save_service(self, service: Service) -> Service: ...

    @abstractmethod
    def delete_service(self, service: Service) -> None: ...

    # =========================
    # CLIENTES
    # =========================

    @abstractmethod
    def list_clients(self) -> List[Client]: ...

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]: ...

    @abstractmethod
    def save_client(self, client: Client) -> Client: ...

    @abstractmethod
    def delete_client(self, client: Client) -> None: ...

    # =========================
    # AGENDAMENTOS
    # =========================

    @abstractmethod
    def list_appointments(
        self,
        staff_id: Optional[int] = None,
        client_id: Optional[int] = None,
    ) -> List[Appointment]: ...

    @abstractmethod
    def get_appointment(self, appointment_id: int) -> Optional[Appointment]: ...

    @abstractmethod
    def save_appointment(self, appointment: Appointment) -> Appointment: ...

    @abstractmethod
    def delete_appointment(self, appointment: Appointment) -> None: ...
