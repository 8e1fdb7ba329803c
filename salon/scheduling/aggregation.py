"""Números do painel, recalculados por inteiro a cada chamada.

Receita só conta agendamentos ``completed``; valores em DA.
Janelas (horário local): hoje = [00:00, 00:00 do dia seguinte),
mês = início a partir do dia 1 às 00:00, ano = a partir de 1º de janeiro.
"""
from datetime import datetime, time, timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from salon.models.appointment import Appointment, AppointmentStatus
from salon.models.client import Client
from salon.models.dashboard import DashboardKPIs, GoldenClient, TopEmployee, TopService
from salon.models.profile import DEFAULT_COLOR, Profile
from salon.models.service import Service
from salon.models.service_category import ServiceCategory


TOP_LIMIT = 5


def day_bounds(now: datetime) -> Tuple[datetime, datetime]:
    start = datetime.combine(now.date(), time(0, 0))
    return start, start + timedelta(days=1)


def month_start(now: datetime) -> datetime:
    return datetime.combine(now.date().replace(day=1), time(0, 0))


def year_start(now: datetime) -> datetime:
    return datetime.combine(now.date().replace(month=1, day=1), time(0, 0))


def _price(services: Mapping[int, Service], service_id: int) -> int:
    service = services.get(service_id)
    return int(service.price) if service else 0


def compute_kpis(
    appointments: Iterable[Appointment],
    services: Mapping[int, Service],
    now: Optional[datetime] = None,
) -> DashboardKPIs:
    now = now or datetime.now()
    today_start, today_end = day_bounds(now)
    first_of_month = month_start(now)
    first_of_year = year_start(now)

    kpis = DashboardKPIs()

    for appt in appointments:
        in_today = today_start <= appt.start_time < today_end

        # contagem do dia inclui qualquer status
        if in_today:
            kpis.appointments_today += 1

        if appt.status == AppointmentStatus.CANCELLED:
            kpis.appointments_cancelled += 1
            continue

        if appt.status != AppointmentStatus.COMPLETED:
            continue

        kpis.appointments_completed += 1
        price = _price(services, appt.service_id)
        if in_today:
            kpis.revenue_today += price
        if appt.start_time >= first_of_month:
            kpis.revenue_month += price
        if appt.start_time >= first_of_year:
            kpis.revenue_year += price

    return kpis


def _monthly_totals(
    appointments: Iterable[Appointment],
    services: Mapping[int, Service],
    key: str,
    now: Optional[datetime],
) -> List[Tuple[int, int, int]]:
    """(id, receita, quantidade) por ``key``, maior receita primeiro.

    Empates mantêm a ordem em que o id apareceu pela primeira vez.
    """
    now = now or datetime.now()
    first_of_month = month_start(now)

    totals: Dict[int, List[int]] = {}
    for appt in appointments:
        if appt.status != AppointmentStatus.COMPLETED or appt.start_time < first_of_month:
            continue
        service = services.get(appt.service_id)
        if not service:
            continue
        entry = totals.setdefault(getattr(appt, key), [0, 0])
        entry[0] += int(service.price)
        entry[1] += 1

    ranked = [(obj_id, revenue, count) for obj_id, (revenue, count) in totals.items()]
    ranked.sort(key=lambda row: row[1], reverse=True)
    return ranked


def top_employees(
    appointments: Iterable[Appointment],
    services: Mapping[int, Service],
    profiles: Mapping[int, Profile],
    now: Optional[datetime] = None,
    limit: int = TOP_LIMIT,
) -> List[TopEmployee]:
    result: List[TopEmployee] = []
    for staff_id, revenue, count in _monthly_totals(appointments, services, "staff_id", now):
        profile = profiles.get(staff_id)
        if not profile:
            continue
        result.append(
            TopEmployee(
                id=profile.id,
                name=profile.full_name,
                color_code=profile.color_code or DEFAULT_COLOR,
                revenue=revenue,
                appointments_count=count,
            )
        )
        if len(result) >= limit:
            break
    return result


def top_services(
    appointments: Iterable[Appointment],
    services: Mapping[int, Service],
    categories: Mapping[int, ServiceCategory],
    now: Optional[datetime] = None,
    limit: int = TOP_LIMIT,
) -> List[TopService]:
    result: List[TopService] = []
    for service_id, revenue, count in _monthly_totals(appointments, services, "service_id", now):
        service = services[service_id]
        category = categories.get(service.category_id)
        result.append(
            TopService(
                id=service.id,
                name=service.name,
                category_name=category.name if category else "",
                count=count,
                revenue=revenue,
            )
        )
        if len(result) >= limit:
            break
    return result


def golden_client(
    appointments: Iterable[Appointment],
    services: Mapping[int, Service],
    clients: Mapping[int, Client],
    now: Optional[datetime] = None,
) -> Optional[GoldenClient]:
    for client_id, revenue, count in _monthly_totals(appointments, services, "client_id", now):
        client = clients.get(client_id)
        if client:
            return GoldenClient(
                id=client.id,
                name=client.full_name,
                phone=client.phone,
                total_spent=revenue,
                appointments_count=count,
            )
    return None
