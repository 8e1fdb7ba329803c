from salon.core.roles import Role
from salon.models.profile import Profile
from salon.models.service import Service
from salon.models.staff_skill import StaffSkill
from salon.scheduling.availability import eligible_staff, services_for_staff, skills_by_profile


HAIR, NAILS, SPA = 1, 2, 3


def _profile(profile_id, role=Role.STAFF):
    return Profile(
        id=profile_id,
        first_name=f"P{profile_id}",
        last_name="X",
        email=f"p{profile_id}@salon.dz",
        role=role,
        password_hash="x",
    )


def _roster():
    return [
        _profile(1),
        _profile(2),
        _profile(3, Role.RECEPTION),
        _profile(4, Role.ADMIN),
        _profile(5, Role.SUPERADMIN),
        _profile(6),
    ]


def test_skills_by_profile_groups_categories():
    skills = [
        StaffSkill(profile_id=1, category_id=HAIR),
        StaffSkill(profile_id=1, category_id=NAILS),
        StaffSkill(profile_id=2, category_id=NAILS),
    ]
    assert skills_by_profile(skills) == {1: {HAIR, NAILS}, 2: {NAILS}}


def test_eligible_staff_matches_skill_or_admin_role():
    service = Service(id=10, category_id=NAILS, name="Manucure", price=1200, duration=30)
    skills = {1: {HAIR}, 2: {NAILS}, 3: {NAILS}}

    result = eligible_staff(service, _roster(), skills)

    assert [p.id for p in result] == [2, 3, 4, 5]


def test_eligible_staff_ignores_skill_assignment_order():
    service = Service(id=10, category_id=HAIR, name="Coupe", price=2000, duration=60)
    a = skills_by_profile([
        StaffSkill(profile_id=6, category_id=HAIR),
        StaffSkill(profile_id=1, category_id=NAILS),
        StaffSkill(profile_id=1, category_id=HAIR),
    ])
    b = skills_by_profile([
        StaffSkill(profile_id=1, category_id=HAIR),
        StaffSkill(profile_id=1, category_id=NAILS),
        StaffSkill(profile_id=6, category_id=HAIR),
    ])

    assert [p.id for p in eligible_staff(service, _roster(), a)] == \
        [p.id for p in eligible_staff(service, _roster(), b)] == [1, 4, 5, 6]


def test_staff_without_skills_is_qualified_for_nothing():
    service = Service(id=10, category_id=SPA, name="Massage", price=4000, duration=60)
    roster = [_profile(1), _profile(2, Role.RECEPTION)]

    assert eligible_staff(service, roster, {}) == []


def test_services_for_staff():
    services = [
        Service(id=1, category_id=HAIR, name="Coupe", price=2000, duration=60),
        Service(id=2, category_id=NAILS, name="Manucure", price=1200, duration=30),
        Service(id=3, category_id=SPA, name="Massage", price=4000, duration=60),
    ]

    assert [s.id for s in services_for_staff(_profile(1), services, {1: {NAILS}})] == [2]
    assert [s.id for s in services_for_staff(_profile(4, Role.ADMIN), services, {})] == [1, 2, 3]
