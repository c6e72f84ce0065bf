"""Status calculator: rolling-window day accounting for the 90/180-day rule."""

from __future__ import annotations

import datetime as dt

from schengen_tracker.domain.calculator import calculate_schengen_status, generate_warnings
from schengen_tracker.domain.membership import always_schengen
from schengen_tracker.domain.models import CountryVisit
from schengen_tracker.nlg import messages

D = dt.date


def _visit(country: str, entry, exit_=None) -> CountryVisit:
    return CountryVisit(country=country, entry_date=entry, exit_date=exit_)


def _three_full_months() -> list[CountryVisit]:
    return [
        _visit("France", "2024-01-01", "2024-01-30"),
        _visit("Italy", "2024-02-10", "2024-03-10"),
        _visit("Spain", "2024-04-01", "2024-04-30"),
    ]


def test_no_visits(membership):
    status = calculate_schengen_status([], D(2024, 1, 16), membership=membership)
    assert status.used_days == 0
    assert status.remaining_days == 90
    assert status.is_compliant
    assert status.violations == []
    assert status.next_reset_date == D(2024, 7, 14)


def test_single_visit_counts_both_border_days(membership):
    """France 01-01 → 01-15, checked on 01-16: 15 days used."""
    visits = [_visit("France", "2024-01-01", "2024-01-15")]
    status = calculate_schengen_status(visits, D(2024, 1, 16), membership=membership)
    assert status.used_days == 15
    assert status.remaining_days == 75
    assert status.is_compliant
    assert status.next_reset_date == D(2024, 6, 29)


def test_exactly_at_limit_is_compliant(membership):
    status = calculate_schengen_status(_three_full_months(), D(2024, 5, 15), membership=membership)
    assert status.used_days == 90
    assert status.remaining_days == 0
    assert status.is_compliant
    assert status.violations == []


def test_one_day_over_limit_yields_single_violation(membership):
    visits = _three_full_months() + [_visit("Germany", "2024-05-01", "2024-05-01")]
    reference = D(2024, 5, 15)
    status = calculate_schengen_status(visits, reference, membership=membership)
    assert status.used_days == 91
    assert status.remaining_days == 0
    assert not status.is_compliant
    assert len(status.violations) == 1
    violation = status.violations[0]
    assert violation.days_over_limit == 1
    assert violation.date == reference
    assert "91 days" in violation.description


def test_non_schengen_visits_never_change_status(membership):
    base = _three_full_months()
    noise = [
        _visit("United Kingdom", "2024-01-01", "2024-05-10"),
        _visit("Ireland", "2024-03-01", None),
        _visit("france", "2024-02-01", "2024-02-20"),  # membership is case-sensitive
    ]
    reference = D(2024, 5, 15)
    assert calculate_schengen_status(base + noise, reference, membership=membership) == calculate_schengen_status(
        base, reference, membership=membership
    )


def test_identical_inputs_give_identical_output(membership):
    visits = _three_full_months()
    first = calculate_schengen_status(visits, D(2024, 5, 15), membership=membership)
    second = calculate_schengen_status(visits, D(2024, 5, 15), membership=membership)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_invariants_hold_across_reference_dates(membership):
    visits = _three_full_months() + [_visit("Austria", "2024-05-01", None)]
    for offset in range(0, 400, 7):
        reference = D(2023, 12, 1) + dt.timedelta(days=offset)
        status = calculate_schengen_status(visits, reference, membership=membership)
        assert status.used_days >= 0
        assert status.remaining_days == max(0, 90 - status.used_days)
        assert (status.used_days <= 90) == status.is_compliant == (status.violations == [])


def test_window_boundary_is_inclusive(membership):
    reference = D(2024, 7, 1)
    start = reference - dt.timedelta(days=180)
    on_edge = [_visit("France", start - dt.timedelta(days=5), start)]
    past_edge = [_visit("France", start - dt.timedelta(days=6), start - dt.timedelta(days=1))]

    assert calculate_schengen_status(on_edge, reference, membership=membership).used_days == 1
    assert calculate_schengen_status(past_edge, reference, membership=membership).used_days == 0


def test_visit_straddling_window_start_is_clipped(membership):
    reference = D(2024, 7, 1)
    start = reference - dt.timedelta(days=180)
    visits = [_visit("Italy", start - dt.timedelta(days=10), start + dt.timedelta(days=4))]
    status = calculate_schengen_status(visits, reference, membership=membership)
    assert status.used_days == 5
    # entry lies before the window, so the reset date falls back to R + 180
    assert status.next_reset_date == reference + dt.timedelta(days=180)


def test_ongoing_visit_runs_until_reference_date(membership):
    visits = [_visit("Portugal", "2024-03-01", None)]
    status = calculate_schengen_status(visits, D(2024, 3, 10), membership=membership)
    assert status.used_days == 10


def test_exit_after_reference_is_clipped(membership):
    visits = [_visit("Portugal", "2024-03-01", "2024-03-20")]
    status = calculate_schengen_status(visits, D(2024, 3, 10), membership=membership)
    assert status.used_days == 10


def test_visit_entirely_after_reference_is_ignored(membership):
    visits = [_visit("Portugal", "2024-03-11", "2024-03-20")]
    status = calculate_schengen_status(visits, D(2024, 3, 10), membership=membership)
    assert status.used_days == 0
    assert status.next_reset_date == D(2024, 3, 10) + dt.timedelta(days=180)


def test_zero_length_visit_counts_one_day(membership):
    visits = [_visit("Malta", "2024-02-02", "2024-02-02")]
    assert calculate_schengen_status(visits, D(2024, 3, 1), membership=membership).used_days == 1


def test_overlapping_visits_are_summed(membership):
    visits = [
        _visit("France", "2024-01-01", "2024-01-10"),
        _visit("France", "2024-01-01", "2024-01-10"),
    ]
    assert calculate_schengen_status(visits, D(2024, 2, 1), membership=membership).used_days == 20


def test_reset_date_uses_earliest_entry_in_window(membership):
    visits = [
        _visit("Spain", "2024-03-05", "2024-03-07"),
        _visit("Greece", "2024-02-01", "2024-02-03"),
    ]
    status = calculate_schengen_status(visits, D(2024, 4, 1), membership=membership)
    assert status.next_reset_date == D(2024, 2, 1) + dt.timedelta(days=180)


def test_accepts_native_dates_and_datetimes(membership):
    visits = [
        CountryVisit(country="France", entry_date=dt.datetime(2024, 1, 1, 23, 30), exit_date=D(2024, 1, 15)),
    ]
    assert visits[0].entry_date == D(2024, 1, 1)
    status = calculate_schengen_status(visits, D(2024, 1, 16), membership=membership)
    assert status.used_days == 15


def test_membership_can_be_any_callable():
    visits = [_visit("Atlantis", "2024-01-01", "2024-01-05")]
    status = calculate_schengen_status(visits, D(2024, 1, 10), membership=lambda country: country == "Atlantis")
    assert status.used_days == 5


def test_every_country_counts_when_all_are_members():
    visits = [
        _visit("United Kingdom", "2024-01-01", "2024-01-05"),
        _visit("France", "2024-01-10", "2024-01-14"),
    ]
    status = calculate_schengen_status(visits, D(2024, 1, 20), membership=always_schengen)
    assert status.used_days == 10


def test_reference_date_defaults_to_today(membership):
    today = dt.date.today()
    visits = [_visit("France", today - dt.timedelta(days=4), None)]
    status = calculate_schengen_status(visits, membership=membership)
    assert status.used_days == 5


def test_status_serializes_to_plain_json(membership):
    visits = [_visit("France", "2024-01-01", "2024-01-15")]
    data = calculate_schengen_status(visits, D(2024, 1, 16), membership=membership).model_dump(mode="json")
    assert data == {
        "used_days": 15,
        "remaining_days": 75,
        "next_reset_date": "2024-06-29",
        "is_compliant": True,
        "violations": [],
    }


# ── warnings ──────────────────────────────────────────


def test_warnings_empty_when_plenty_of_days(membership):
    status = calculate_schengen_status([], D(2024, 1, 1), membership=membership)
    assert generate_warnings(status) == []


def test_warning_for_low_remaining_days(membership):
    visits = [_visit("France", "2024-01-01", "2024-03-25")]  # 85 days
    status = calculate_schengen_status(visits, D(2024, 3, 26), membership=membership)
    assert status.remaining_days == 5
    assert generate_warnings(status) == [messages.low_remaining_days(5)]


def test_warning_when_limit_reached(membership):
    status = calculate_schengen_status(_three_full_months(), D(2024, 5, 15), membership=membership)
    assert generate_warnings(status) == [messages.STATUS_LIMIT_REACHED]


def test_warning_on_violation(membership):
    visits = _three_full_months() + [_visit("Germany", "2024-05-01", "2024-05-01")]
    status = calculate_schengen_status(visits, D(2024, 5, 15), membership=membership)
    assert generate_warnings(status) == [messages.STATUS_VIOLATION]
