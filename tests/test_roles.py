import pytest

from salon.core.roles import Capability, Role, can, is_skill_exempt


@pytest.mark.parametrize("role", [Role.SUPERADMIN, Role.ADMIN])
def test_admins_have_every_capability(role):
    assert all(can(role, capability) for capability in Capability)


def test_reception_manages_clients_and_calendar_only():
    assert can(Role.RECEPTION, Capability.MANAGE_CLIENTS)
    assert can(Role.RECEPTION, Capability.MANAGE_CALENDAR)
    assert not can(Role.RECEPTION, Capability.MANAGE_CATALOG)
    assert not can(Role.RECEPTION, Capability.MANAGE_STAFF)
    assert not can(Role.RECEPTION, Capability.VIEW_DASHBOARD)


def test_staff_only_manages_own_schedule():
    allowed = [c for c in Capability if can(Role.STAFF, c)]
    assert allowed == [Capability.MANAGE_OWN_SCHEDULE]


def test_role_strings_are_accepted():
    assert can("admin", Capability.MANAGE_CATALOG)
    assert not can("staff", Capability.MANAGE_CLIENTS)


def test_unknown_role_is_rejected():
    with pytest.raises(ValueError):
        can("owner", Capability.MANAGE_CLIENTS)


def test_skill_exemption():
    assert is_skill_exempt(Role.SUPERADMIN)
    assert is_skill_exempt(Role.ADMIN)
    assert not is_skill_exempt(Role.RECEPTION)
    assert not is_skill_exempt(Role.STAFF)
