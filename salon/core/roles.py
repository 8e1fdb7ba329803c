from enum import Enum


class Role(str, Enum):
    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    RECEPTION = "reception"
    STAFF = "staff"


class Capability(str, Enum):
    MANAGE_CATALOG = "manage_catalog"
    MANAGE_STAFF = "manage_staff"
    VIEW_DASHBOARD = "view_dashboard"
    MANAGE_CLIENTS = "manage_clients"
    MANAGE_CALENDAR = "manage_calendar"
    MANAGE_OWN_SCHEDULE = "manage_own_schedule"


_ADMIN = frozenset(Capability)

ROLE_CAPABILITIES = {
    Role.SUPERADMIN: _ADMIN,
    Role.ADMIN: _ADMIN,
    Role.RECEPTION: frozenset(
        {Capability.MANAGE_CLIENTS, Capability.MANAGE_CALENDAR, Capability.MANAGE_OWN_SCHEDULE}
    ),
    Role.STAFF: frozenset({Capability.MANAGE_OWN_SCHEDULE}),
}


def can(role: Role, capability: Capability) -> bool:
    return capability in ROLE_CAPABILITIES.get(Role(role), frozenset())


def is_skill_exempt(role: Role) -> bool:
    # admin/superadmin atendem qualquer categoria
    return Role(role) in (Role.SUPERADMIN, Role.ADMIN)
