from typing import Optional
from sqlmodel import SQLModel, Field


class ServiceCategoryBase(SQLModel):
    name: str = Field(min_length=1, index=True, unique=True)


class ServiceCategory(ServiceCategoryBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)


class ServiceCategoryCreate(ServiceCategoryBase):
    pass


class ServiceCategoryRead(ServiceCategoryBase):
    id: int
