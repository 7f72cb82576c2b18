"""Streaming availability estimation."""

from datetime import date, timedelta
from typing import Iterable, Optional

from ...infrastructure.logging import LoggerMixin
from ...utils.date_utils import DateLike, parse_date
from ..models import EstimateSource, EstimationOutcome, EstimationResult, StudioEstimate
from .distributors import resolve_distributor_estimate
from .studio_table import CompanyLike, lookup_by_studio


def project_date(release_date: DateLike, window_days: int) -> Optional[date]:
    """Add a theatrical window to a release date in calendar days.

    Returns None when the release date is missing or malformed.
    """
    parsed = parse_date(release_date)
    if parsed is None:
        return None
    try:
        return parsed + timedelta(days=window_days)
    except OverflowError:
        return None


class EstimationEngine(LoggerMixin):
    """Predicts where and when a movie will start streaming.

    Only meaningful when no subscription provider is confirmed for the
    reference region; confirmed data always wins over an estimate.
    """

    def estimate(
        self,
        companies: Optional[Iterable[CompanyLike]],
        release_date: DateLike,
        distributor_label: Optional[str] = None,
        has_flatrate: bool = False,
    ) -> EstimationOutcome:
        """Estimate streaming availability.

        The studio estimate and the distributor estimate are independent:
        both may be present at once.

        Args:
            companies: Production companies in credit order.
            release_date: Theatrical release date as a date or ``YYYY-MM-DD``.
            distributor_label: Distributor explicitly chosen by the user.
            has_flatrate: Whether a subscription provider is already confirmed.

        Returns:
            Studio and distributor estimates, each None when not applicable.
        """
        if has_flatrate:
            self.logger.debug("Subscription provider confirmed, skipping estimation")
            return EstimationOutcome()

        outcome = EstimationOutcome()

        studio_estimate = lookup_by_studio(companies)
        if studio_estimate is not None:
            outcome.studio = self._build_result(
                studio_estimate, release_date, EstimateSource.STUDIO_MATCH
            )

        if distributor_label:
            distributor_estimate = resolve_distributor_estimate(distributor_label)
            if distributor_estimate is not None:
                outcome.distributor = self._build_result(
                    distributor_estimate,
                    release_date,
                    EstimateSource.DISTRIBUTOR_SELECTION,
                    label=distributor_label,
                )
            else:
                self.logger.debug(f"No estimate for distributor: {distributor_label}")

        return outcome

    def _build_result(
        self,
        estimate: StudioEstimate,
        release_date: DateLike,
        source: EstimateSource,
        label: Optional[str] = None,
    ) -> EstimationResult:
        projected = project_date(release_date, estimate.window_days)
        if projected is None:
            self.logger.debug(f"Cannot project date from release date {release_date!r}")
            return EstimationResult(source=EstimateSource.NONE, label=label)

        return EstimationResult(
            platform_name=estimate.platform_name,
            projected_date=projected,
            source=source,
            label=label,
        )
