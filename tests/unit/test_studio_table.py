"""Test studio estimate lookup."""

import pytest

from where_to_watch.core.estimation import STUDIO_STREAMING_ESTIMATES, lookup_by_studio
from where_to_watch.core.models import ProductionCompany, StudioEstimate


def _company(name: str, company_id: int = 1) -> ProductionCompany:
    return ProductionCompany(id=company_id, name=name)


@pytest.mark.unit
@pytest.mark.parametrize(
    "name",
    [
        "Walt Disney Pictures",
        "Pixar",
        "Marvel Studios",
        "Lucasfilm Ltd.",
        "Searchlight Pictures",
        "20th Century Studios",
        "Warner Bros. Pictures",
        "New Line Cinema",
        "DC Films",
        "DC Studios",
        "Universal Pictures",
        "Illumination",
        "Focus Features",
        "Paramount",
        "Columbia Pictures",
        "Sony Pictures Entertainment (SPE)",
        "Screen Gems",
        "Lionsgate",
        "A24",
    ],
)
def test_every_known_studio_resolves_to_its_entry(name):
    """Each studio's correctly-cased name maps to its own table entry."""
    estimate = lookup_by_studio([_company(name)])

    assert estimate is STUDIO_STREAMING_ESTIMATES[name.lower()]


@pytest.mark.unit
def test_table_keys_are_normalized():
    """Table keys are lowercase and trimmed."""
    for key in STUDIO_STREAMING_ESTIMATES:
        assert key == key.strip().lower()


@pytest.mark.unit
def test_table_windows_are_non_negative():
    """Every window is a non-negative number of days."""
    for estimate in STUDIO_STREAMING_ESTIMATES.values():
        assert isinstance(estimate, StudioEstimate)
        assert estimate.window_days >= 0


@pytest.mark.unit
def test_table_is_read_only():
    """The table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        STUDIO_STREAMING_ESTIMATES["new studio"] = STUDIO_STREAMING_ESTIMATES["a24"]  # type: ignore


@pytest.mark.unit
def test_estimates_are_frozen():
    """Individual estimates are immutable."""
    estimate = STUDIO_STREAMING_ESTIMATES["a24"]

    with pytest.raises(Exception):
        estimate.window_days = 1  # type: ignore


@pytest.mark.unit
def test_first_known_company_wins_when_first_is_unknown():
    """An unknown first company is skipped in favour of the next known one."""
    estimate = lookup_by_studio([_company("Unknown Studio"), _company("Universal Pictures", 33)])

    assert estimate is STUDIO_STREAMING_ESTIMATES["universal pictures"]
    assert estimate.platform_name == "Peacock"
    assert estimate.window_days == 45


@pytest.mark.unit
def test_credit_order_decides_between_two_known_companies():
    """With two known studios, the earlier credit wins."""
    estimate = lookup_by_studio([_company("Columbia Pictures"), _company("Marvel Studios")])

    assert estimate.platform_name == "Netflix"
    assert estimate.window_days == 120


@pytest.mark.unit
def test_names_are_trimmed_and_case_folded():
    """Whitespace and case differences still match."""
    estimate = lookup_by_studio(["  WARNER BROS. PICTURES "])

    assert estimate is STUDIO_STREAMING_ESTIMATES["warner bros. pictures"]


@pytest.mark.unit
@pytest.mark.parametrize("companies", [None, [], [_company("Unknown Studio"), _company("Neon")]])
def test_no_match_returns_none(companies):
    """Empty or entirely unknown company lists have no estimate."""
    assert lookup_by_studio(companies) is None


@pytest.mark.unit
def test_no_partial_or_parent_company_matching():
    """Only exact normalized names match."""
    assert lookup_by_studio(["Marvel Entertainment"]) is None
    assert lookup_by_studio(["Universal"]) is None
    assert lookup_by_studio(["Paramount Pictures"]) is None
