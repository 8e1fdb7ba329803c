from sqlmodel import SQLModel


class DashboardKPIs(SQLModel):
    revenue_today: int = 0
    revenue_month: int = 0
    revenue_year: int = 0
    appointments_today: int = 0
    appointments_completed: int = 0
    appointments_cancelled: int = 0


class TopEmployee(SQLModel):
    id: int
    name: str
    color_code: str
    revenue: int
    appointments_count: int


class TopService(SQLModel):
    id: int
    name: str
    category_name: str
    count: int
    revenue: int


class GoldenClient(SQLModel):
    id: int
    name: str
    phone: str
    total_spent: int
    appointments_count: int
