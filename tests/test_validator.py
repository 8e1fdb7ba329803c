from datetime import datetime

import pytest

from salon.core.errors import InvalidTransition
from salon.models.appointment import Appointment, AppointmentStatus
from salon.models.service import Service
from salon.scheduling.validator import (
    can_transition,
    check_transition,
    compute_end_time,
    find_conflicts,
    overlaps,
)


def _appt(appt_id, staff_id, start, end, status=AppointmentStatus.PENDING):
    return Appointment(
        id=appt_id,
        client_id=1,
        staff_id=staff_id,
        service_id=1,
        start_time=start,
        end_time=end,
        status=status,
    )


def test_end_time_is_start_plus_duration():
    service = Service(id=1, category_id=1, name="Coupe", price=2000, duration=60)
    assert compute_end_time(datetime(2024, 1, 1, 9, 0), service) == datetime(2024, 1, 1, 10, 0)


def test_end_time_crosses_midnight():
    service = Service(id=1, category_id=1, name="Coloration", price=5000, duration=120)
    assert compute_end_time(datetime(2024, 1, 1, 23, 0), service) == datetime(2024, 1, 2, 1, 0)


def test_overlaps_half_open_intervals():
    nine, half_past, ten, half_past_ten = (
        datetime(2024, 1, 1, 9, 0),
        datetime(2024, 1, 1, 9, 30),
        datetime(2024, 1, 1, 10, 0),
        datetime(2024, 1, 1, 10, 30),
    )
    assert overlaps(nine, ten, half_past, half_past_ten)
    assert overlaps(half_past, half_past_ten, nine, ten)
    # encostados não conflitam
    assert not overlaps(nine, ten, ten, half_past_ten)
    assert not overlaps(ten, half_past_ten, nine, ten)


def test_find_conflicts_skips_other_staff_and_cancelled():
    existing = [
        _appt(1, 7, datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 10, 0)),
        _appt(2, 8, datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 10, 0)),
        _appt(3, 7, datetime(2024, 1, 1, 9, 15), datetime(2024, 1, 1, 9, 45), AppointmentStatus.CANCELLED),
        _appt(4, 7, datetime(2024, 1, 1, 10, 0), datetime(2024, 1, 1, 11, 0), AppointmentStatus.CONFIRMED),
    ]

    conflicts = find_conflicts(7, datetime(2024, 1, 1, 9, 30), datetime(2024, 1, 1, 10, 30), existing)

    assert [a.id for a in conflicts] == [1, 4]


@pytest.mark.parametrize(
    "current,new",
    [
        (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED),
        (AppointmentStatus.PENDING, AppointmentStatus.CANCELLED),
        (AppointmentStatus.CONFIRMED, AppointmentStatus.COMPLETED),
        (AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED),
        (AppointmentStatus.COMPLETED, AppointmentStatus.COMPLETED),
    ],
)
def test_allowed_transitions(current, new):
    assert can_transition(current, new)
    check_transition(current, new)


@pytest.mark.parametrize(
    "current,new",
    [
        (AppointmentStatus.PENDING, AppointmentStatus.COMPLETED),
        (AppointmentStatus.CONFIRMED, AppointmentStatus.PENDING),
        (AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED),
        (AppointmentStatus.CANCELLED, AppointmentStatus.CONFIRMED),
    ],
)
def test_rejected_transitions(current, new):
    assert not can_transition(current, new)
    with pytest.raises(InvalidTransition) as exc:
        check_transition(current, new)
    assert exc.value.current == current.value
    assert exc.value.requested == new.value


@pytest.mark.parametrize("terminal", [AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED])
def test_terminal_statuses_have_no_exit(terminal):
    others = [s for s in AppointmentStatus if s != terminal]
    assert not any(can_transition(terminal, s) for s in others)


def test_transitions_accept_raw_strings():
    assert can_transition("pending", "confirmed")
    assert not can_transition("cancelled", "pending")
