from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from salon.models.service_category import ServiceCategoryRead


class ServiceBase(SQLModel):
    name: str = Field(min_length=1)
    category_id: int = Field(foreign_key="servicecategory.id", index=True)
    price: int = Field(ge=0)  # em DA
    duration: int = Field(gt=0)  # minutos


class Service(ServiceBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime())


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(SQLModel):
    name: Optional[str] = Field(default=None, min_length=1)
    category_id: Optional[int] = None
    price: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, gt=0)


class ServiceRead(ServiceBase):
    id: int
    created_at: Optional[datetime] = None


class ServiceWithCategory(ServiceRead):
    category: Optional[ServiceCategoryRead] = None
