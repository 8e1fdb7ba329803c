from sqlmodel import SQLModel, Field


class StaffSkill(SQLModel, table=True):
    """Profissional (profile) habilitado para os serviços de uma categoria."""

    profile_id: int = Field(foreign_key="profile.id", primary_key=True)
    category_id: int = Field(foreign_key="servicecategory.id", primary_key=True)
