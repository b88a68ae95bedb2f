"""Snapshot de rate limit extraído dos headers de resposta."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Mapping

RATE_LIMIT_HEADER = "X-Ratelimit-Limit"
RATE_REMAINING_HEADER = "X-Ratelimit-Remaining"
RATE_RESET_HEADER = "X-Ratelimit-Reset"


class StreamRateLimits(BaseModel):
    """Limite, restante e instante de reset da janela de rate limit."""

    model_config = ConfigDict(frozen=True)

    limit: int = Field(ge=0)
    remaining: int = Field(ge=0)
    reset: datetime

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> StreamRateLimits | None:
        """Monta snapshot a partir dos headers X-Ratelimit-*.

        Returns:
            StreamRateLimits ou None se X-Ratelimit-Limit estiver ausente.
        """
        if headers.get(RATE_LIMIT_HEADER) is None:
            return None
        return cls(
            limit=_to_int(headers.get(RATE_LIMIT_HEADER)),
            remaining=_to_int(headers.get(RATE_REMAINING_HEADER)),
            reset=datetime.fromtimestamp(_to_int(headers.get(RATE_RESET_HEADER)), tz=UTC),
        )


def _to_int(value: Any) -> int:
    # Headers ausentes ou malformados contam como zero
    try:
        return max(int(str(value).strip()), 0)
    except (TypeError, ValueError):
        return 0
