"""Alert reporting: display ordering, severity tallies and the coach feed.

Evaluation order is the rule-table order; coaches see alerts ranked by
severity instead. The feed works over persisted alert records (plain
mappings as the request layer stores them) rather than AlertResult objects,
because it mixes alerts from many submissions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from coach_engine.exceptions import InvalidSeverityError
from coach_engine.models.alert import AlertResult
from coach_engine.models.enums import FEED_DEFAULT_LIMIT, FEED_MAX_LIMIT, AlertSeverity

# Unknown severities sort after every real one
_UNKNOWN_RANK = 99


def severity_rank(severity: AlertSeverity | str) -> int:
    """Display rank: critical=0, high=1, medium=2, low=3."""
    if isinstance(severity, AlertSeverity):
        return int(severity)
    try:
        return int(AlertSeverity.from_label(severity))
    except KeyError:
        return _UNKNOWN_RANK


def sort_for_display(alerts: Iterable[AlertResult]) -> list[AlertResult]:
    """Sort by severity, most urgent first. Ties keep evaluation order."""
    return sorted(alerts, key=lambda a: severity_rank(a.severity))


def severity_counts(alerts: Iterable[AlertResult]) -> dict[AlertSeverity, int]:
    """Count alerts per severity. Every severity is present, zero if unused."""
    counts = {severity: 0 for severity in AlertSeverity}
    for alert in alerts:
        counts[alert.severity] += 1
    return counts


def critical_alerts(alerts: Iterable[AlertResult]) -> list[AlertResult]:
    """The alerts that warrant a push notification to the coach."""
    return [a for a in alerts if a.is_critical]


def requires_notification(alerts: Iterable[AlertResult]) -> bool:
    return any(a.is_critical for a in alerts)


# ---------------------------------------------------------------------------
# Coach alert feed
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AlertFeedPage:
    """One page of the coach alert feed."""

    alerts: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0
    limit: int = FEED_DEFAULT_LIMIT
    offset: int = 0

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total


def _clamp_limit(limit: int | None) -> int:
    if limit is None or limit < 1:
        return FEED_DEFAULT_LIMIT
    return min(limit, FEED_MAX_LIMIT)


def build_alert_feed(
    records: Iterable[Mapping[str, Any]],
    severity: str | None = None,
    limit: int | None = FEED_DEFAULT_LIMIT,
    offset: int = 0,
    resolved: bool = False,
    group_id: str | None = None,
) -> AlertFeedPage:
    """Rank persisted alert records for a coach's feed.

    Records need at least ``severity`` and ``createdAt`` (datetime or ISO
    string), and may carry ``isResolved`` and ``groupId``; every key is
    carried through untouched.

    Args:
        records: Persisted alert records.
        severity: Optional filter, one of critical/high/medium/low.
        limit: Page size; values below 1 fall back to the default and
            values above the maximum are clamped.
        offset: Records to skip; negative values are treated as 0.
        resolved: When False (the default) only records whose ``isResolved``
            is not True are shown; when True every record is shown.
        group_id: Optional filter on the records' ``groupId``.

    Returns:
        AlertFeedPage sorted by severity rank, then newest first.

    Raises:
        InvalidSeverityError: if ``severity`` is not a known label.
    """
    if severity is not None and severity not in {s.label for s in AlertSeverity}:
        raise InvalidSeverityError(
            "Severity must be one of: critical, high, medium, low."
        )

    limit = _clamp_limit(limit)
    offset = max(offset, 0)

    frame = pd.DataFrame.from_records(list(records))
    if frame.empty:
        return AlertFeedPage(alerts=[], total=0, limit=limit, offset=offset)

    if not resolved and "isResolved" in frame.columns:
        frame = frame[~frame["isResolved"].eq(True)]
    if group_id is not None:
        if "groupId" in frame.columns:
            frame = frame[frame["groupId"] == group_id]
        else:
            frame = frame.iloc[0:0]
    if severity is not None:
        frame = frame[frame["severity"] == severity]

    frame = frame.assign(
        _rank=frame["severity"].map(severity_rank),
        _created=pd.to_datetime(frame["createdAt"], utc=True),
    )
    frame = frame.sort_values(
        by=["_rank", "_created"], ascending=[True, False], kind="mergesort"
    )

    total = len(frame)
    page = frame.iloc[offset:offset + limit].drop(columns=["_rank", "_created"])
    return AlertFeedPage(
        alerts=page.to_dict(orient="records"),
        total=total,
        limit=limit,
        offset=offset,
    )
