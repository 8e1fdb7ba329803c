from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from salon.core.roles import Role
from salon.core.security import create_access_token, get_password_hash
from salon.database import create_db_and_tables, get_session
from salon.main import app
from salon.models.appointment import Appointment, AppointmentStatus
from salon.models.client import Client
from salon.models.profile import Profile
from salon.models.service import Service
from salon.models.service_category import ServiceCategory
from salon.repositories.sql import SqlRepository
from salon.scheduling.validator import compute_end_time


PASSWORD = "secret123"
_PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="repo")
def repo_fixture(session):
    return SqlRepository(session)


@pytest.fixture(name="client")
def client_fixture(session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def make_profile(repo, role, email, first_name="Test", last_name="User", skills=()):
    profile = repo.save_profile(
        Profile(
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            password_hash=_PASSWORD_HASH,
        )
    )
    if skills:
        repo.set_skills(profile.id, list(skills))
    return profile


def auth_headers(profile):
    token = create_access_token(data={"sub": profile.email})
    return {"Authorization": f"Bearer {token}"}


def make_appointment(repo, client, staff, service, start, status=AppointmentStatus.PENDING):
    return repo.save_appointment(
        Appointment(
            client_id=client.id,
            staff_id=staff.id,
            service_id=service.id,
            start_time=start,
            end_time=compute_end_time(start, service),
            status=status,
        )
    )


@pytest.fixture(name="salon")
def salon_fixture(repo):
    """Salão pequeno: 2 categorias, admin, recepção, 2 profissionais, 2 serviços, 1 cliente."""
    hair = repo.save_category(ServiceCategory(name="Coiffure"))
    nails = repo.save_category(ServiceCategory(name="Onglerie"))

    admin = make_profile(repo, Role.ADMIN, "admin@salon.dz", "Nadia", "Admin")
    reception = make_profile(repo, Role.RECEPTION, "reception@salon.dz", "Lina", "Accueil")
    amina = make_profile(repo, Role.STAFF, "amina@salon.dz", "Amina", "Benali", skills=[hair.id])
    sara = make_profile(repo, Role.STAFF, "sara@salon.dz", "Sara", "Khelifi", skills=[nails.id])

    haircut = repo.save_service(Service(category_id=hair.id, name="Coupe femme", price=2000, duration=60))
    manicure = repo.save_service(Service(category_id=nails.id, name="Manucure", price=1200, duration=30))

    customer = repo.save_client(Client(full_name="Yasmine Haddad", phone="0550123456"))

    return SimpleNamespace(
        hair=hair,
        nails=nails,
        admin=admin,
        reception=reception,
        amina=amina,
        sara=sara,
        haircut=haircut,
        manicure=manicure,
        customer=customer,
        admin_headers=auth_headers(admin),
        reception_headers=auth_headers(reception),
        amina_headers=auth_headers(amina),
        sara_headers=auth_headers(sara),
    )
