"""Distributor choices and their mapping onto studio estimates."""

from typing import Optional, Tuple

from ..models import StudioEstimate
from .studio_table import STUDIO_STREAMING_ESTIMATES

# Shown to the user, in order, when no studio estimate is available.
# Combined labels stand for several allied studios.
DISTRIBUTOR_LABELS: Tuple[str, ...] = (
    "A24",
    "Warner Bros. / New Line",
    "Disney / 20th Century / Searchlight",
    "Sony Pictures / Columbia / Screen Gems",
    "Bleecker Street",
    "Briarcliff Entertainment",
    "Focus Features",
    "IFC Films",
    "Lionsgate",
    "Magnolia Pictures",
    "Neon",
    "Open Road Films",
    "Paramount Pictures",
    "Roadside Attractions",
    "Universal Pictures",
    "Well Go USA Entertainment",
    "Other / Independent",
)


def _first_estimate(*keys: str) -> Optional[StudioEstimate]:
    for key in keys:
        estimate = STUDIO_STREAMING_ESTIMATES.get(key)
        if estimate is not None:
            return estimate
    return None


def resolve_distributor_estimate(label: str) -> Optional[StudioEstimate]:
    """Map a distributor label onto a studio estimate.

    Keyword groups are checked in a fixed order, so a label naming several
    groups resolves to the first one. Labels outside every group, such as
    "Other / Independent", have no estimate.

    Args:
        label: Entry from DISTRIBUTOR_LABELS.

    Returns:
        Matching studio estimate, or None.
    """
    name = label.lower()

    if "disney" in name or "20th century" in name or "searchlight" in name:
        return _first_estimate(
            "searchlight pictures", "20th century studios", "walt disney pictures"
        )
    if "warner" in name or "new line" in name:
        return _first_estimate("warner bros. pictures")
    if "universal" in name or "focus features" in name:
        if "focus features" in name:
            return _first_estimate("focus features")
        return _first_estimate("universal pictures")
    if "paramount" in name:
        return _first_estimate("paramount")
    if "sony" in name or "columbia" in name or "screen gems" in name:
        # Columbia stands in for the whole Sony group
        return _first_estimate("columbia pictures")
    if "lionsgate" in name:
        return _first_estimate("lionsgate")
    if "a24" in name:
        return _first_estimate("a24")

    return None
