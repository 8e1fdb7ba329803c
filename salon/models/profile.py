from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from salon.core.roles import Role


DEFAULT_COLOR = "#3B82F6"


class ProfileBase(SQLModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(index=True, unique=True)
    role: Role = Field(default=Role.STAFF, index=True)
    color_code: str = DEFAULT_COLOR


class Profile(ProfileBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ProfileCreate(ProfileBase):
    email: EmailStr
    password: str = Field(min_length=4)
    skills: List[int] = []


class ProfileUpdate(SQLModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    role: Optional[Role] = None
    color_code: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=4)
    # None = mantém; lista = substitui o conjunto
    skills: Optional[List[int]] = None


class ProfileRead(ProfileBase):
    id: int
    created_at: Optional[datetime] = None


class ProfileWithSkills(ProfileRead):
    skills: List[int] = []
