from sqlmodel import Session

from salon.core.roles import Role
from salon.core.security import get_password_hash
from salon.database import create_db_and_tables, engine
from salon.models.profile import Profile
from salon.models.service import Service
from salon.models.service_category import ServiceCategory
from salon.repositories.sql import SqlRepository


ADMIN_EMAIL = "admin@salon.dz"
ADMIN_PASSWORD = "admin123"

CATEGORIES = ["Coiffure", "Esthétique", "Onglerie", "Maquillage", "Spa & Massage"]

# (categoria, nome, preço em DA, duração em minutos)
SERVICES = [
    ("Coiffure", "Brushing", 1500, 45),
    ("Coiffure", "Coupe femme", 2000, 60),
    ("Coiffure", "Coloration", 5000, 120),
    ("Esthétique", "Soin du visage", 3500, 60),
    ("Onglerie", "Manucure", 1200, 30),
    ("Spa & Massage", "Massage relaxant", 4000, 60),
]

STAFF = [
    # (nome, sobrenome, email, cor, categorias)
    ("Amina", "Benali", "amina@salon.dz", "#EC4899", ["Coiffure"]),
    ("Sara", "Khelifi", "sara@salon.dz", "#10B981", ["Esthétique", "Onglerie"]),
]


def main(bind=None):
    bind = bind or engine
    create_db_and_tables(bind)

    with Session(bind) as session:
        repository = SqlRepository(session)

        # 1) categorias
        categories = {}
        for name in CATEGORIES:
            category = repository.get_category_by_name(name)
            if not category:
                category = repository.save_category(ServiceCategory(name=name))
            categories[name] = category

        # 2) superadmin
        if not repository.get_profile_by_email(ADMIN_EMAIL):
            repository.save_profile(
                Profile(
                    first_name="Super",
                    last_name="Admin",
                    email=ADMIN_EMAIL,
                    role=Role.SUPERADMIN,
                    password_hash=get_password_hash(ADMIN_PASSWORD),
                )
            )

        # 3) serviços (se o catálogo estiver vazio)
        if not repository.list_services():
            for category_name, name, price, duration in SERVICES:
                repository.save_service(
                    Service(
                        category_id=categories[category_name].id,
                        name=name,
                        price=price,
                        duration=duration,
                    )
                )

        # 4) equipe com habilidades
        for first_name, last_name, email, color, skill_names in STAFF:
            if repository.get_profile_by_email(email):
                continue
            profile = repository.save_profile(
                Profile(
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                    role=Role.STAFF,
                    color_code=color,
                    password_hash=get_password_hash("staff123"),
                )
            )
            repository.set_skills(profile.id, [categories[n].id for n in skill_names])

        print("✅ Seed concluído!")
        print(f"Superadmin: {ADMIN_EMAIL}")
        print(f"Categorias: {', '.join(CATEGORIES)}")


if __name__ == "__main__":
    main()
