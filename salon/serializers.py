from typing import Dict, Iterable, List, Optional

from salon.models.appointment import Appointment, AppointmentDetails
from salon.models.client import Client, ClientRead
from salon.models.profile import Profile, ProfileRead, ProfileWithSkills
from salon.models.service import Service, ServiceWithCategory
from salon.models.service_category import ServiceCategory, ServiceCategoryRead
from salon.repositories.base import Repository


def profile_with_skills(profile: Profile, skills: Iterable[int]) -> ProfileWithSkills:
    data = ProfileRead.model_validate(profile).model_dump()
    return ProfileWithSkills(**data, skills=sorted(skills))


def service_with_category(service: Service, category: Optional[ServiceCategory]) -> ServiceWithCategory:
    data = ServiceWithCategory.model_validate(service).model_dump(exclude={"category"})
    return ServiceWithCategory(
        **data,
        category=ServiceCategoryRead.model_validate(category) if category else None,
    )


def appointments_with_details(
    repository: Repository, appointments: Iterable[Appointment]
) -> List[AppointmentDetails]:
    """Junta cliente, profissional e serviço (com categoria) a cada agendamento."""
    appointments = list(appointments)
    if not appointments:
        return []

    clients: Dict[int, Client] = {c.id: c for c in repository.list_clients()}
    profiles: Dict[int, Profile] = {p.id: p for p in repository.list_profiles()}
    services: Dict[int, Service] = {s.id: s for s in repository.list_services()}
    categories: Dict[int, ServiceCategory] = {c.id: c for c in repository.list_categories()}

    result = []
    for appt in appointments:
        client = clients.get(appt.client_id)
        staff = profiles.get(appt.staff_id)
        service = services.get(appt.service_id)
        data = AppointmentDetails.model_validate(appt).model_dump(exclude={"client", "staff", "service"})
        result.append(
            AppointmentDetails(
                **data,
                client=ClientRead.model_validate(client) if client else None,
                staff=ProfileRead.model_validate(staff) if staff else None,
                service=(
                    service_with_category(service, categories.get(service.category_id))
                    if service else None
                ),
            )
        )
    return result
