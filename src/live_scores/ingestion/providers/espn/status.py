from __future__ import annotations

from live_scores.ingestion.providers.base.errors import UnknownStatusError
from live_scores.models.enums import Status

HALFTIME = "STATUS_HALFTIME"

ESPN_STATUS_MAP: dict[str, Status] = {
    "STATUS_IN_PROGRESS": Status.ACTIVE,
    "STATUS_FINAL": Status.END,
    "STATUS_PLAY_COMPLETE": Status.END,
    "STATUS_SCHEDULED": Status.PREGAME,
    "STATUS_END_PERIOD": Status.INTERMISSION,
    HALFTIME: Status.INTERMISSION,
    "STATUS_DELAYED": Status.INTERMISSION,
    "STATUS_POSTPONED": Status.INVALID,
    "STATUS_CANCELED": Status.INVALID,
}


def map_espn_status(code: str) -> Status:
    """Map an ESPN `status.type.name` code. Unknown codes raise UnknownStatusError."""

    try:
        return ESPN_STATUS_MAP[code]
    except KeyError:
        raise UnknownStatusError(code) from None
