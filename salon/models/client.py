from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


class ClientBase(SQLModel):
    full_name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: Optional[str] = None
    notes: Optional[str] = None


class Client(ClientBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime())


class ClientCreate(ClientBase):
    pass


class ClientUpdate(SQLModel):
    full_name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    notes: Optional[str] = None


class ClientRead(ClientBase):
    id: int
    created_at: Optional[datetime] = None
