import logging

from sqlmodel import Session, SQLModel, create_engine

from salon.core.config import DATABASE_URL

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)


def create_db_and_tables(bind=None):
    # garante que todas as tabelas estão registradas no metadata
    from salon.models import appointment, client, profile, service, service_category, staff_skill  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("Tabelas criadas/verificadas")


def get_session():
    with Session(engine) as session:
        yield session
