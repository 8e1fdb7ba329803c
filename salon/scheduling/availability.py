from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Set

from salon.core.roles import is_skill_exempt
from salon.models.profile import Profile
from salon.models.service import Service
from salon.models.staff_skill import StaffSkill


def skills_by_profile(skills: Iterable[StaffSkill]) -> Dict[int, Set[int]]:
    result: Dict[int, Set[int]] = defaultdict(set)
    for skill in skills:
        result[skill.profile_id].add(skill.category_id)
    return dict(result)


def is_qualified(profile: Profile, category_id: int, skill_set: Set[int]) -> bool:
    return is_skill_exempt(profile.role) or category_id in skill_set


def eligible_staff(
    service: Service,
    profiles: Iterable[Profile],
    skills: Mapping[int, Set[int]],
) -> List[Profile]:
    """Profissionais que podem executar o serviço, na ordem do cadastro.

    Lista vazia é resultado válido (nenhum profissional habilitado).
    """
    return [
        p for p in profiles
        if is_qualified(p, service.category_id, skills.get(p.id, set()))
    ]


def services_for_staff(
    profile: Profile,
    services: Iterable[Service],
    skills: Mapping[int, Set[int]],
) -> List[Service]:
    skill_set = skills.get(profile.id, set())
    return [s for s in services if is_qualified(profile, s.category_id, skill_set)]
