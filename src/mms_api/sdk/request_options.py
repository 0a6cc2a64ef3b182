"""
Request options for list endpoints and their query-string builders.

Builders are pure: absent fields are left out, booleans are lowercase and
timestamps use a fixed round-trip format. Ids interpolated into paths go
through path_segment.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from urllib.parse import quote


def format_round_trip(value: datetime) -> str:
    """Format a datetime as YYYY-MM-DDTHH:MM:SS.fffffff[Z|±HH:MM].

    Naive values carry no offset, UTC values end in 'Z'.

    Examples:
        datetime(2022, 1, 1)                    -> "2022-01-01T00:00:00.0000000"
        datetime(2022, 1, 1, tzinfo=utc)        -> "2022-01-01T00:00:00.0000000Z"
    """
    text = value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond:06d}0"

    offset = value.utcoffset()
    if offset is None:
        return text
    if offset == timedelta(0):
        return text + "Z"

    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _query_value(value: str) -> str:
    return quote(value, safe=":")


def path_segment(value) -> str:
    """Percent-encode an id, email or key for use as one path segment."""
    return quote(str(value), safe="@")


@dataclass
class MemberAccountsRequest:
    """Paging and time-window options for listing member accounts."""
    current_gym_only: bool = True
    from_timestamp: Optional[datetime] = None
    limit: int = 10
    offset: int = 0
    to_timestamp: Optional[datetime] = None

    def to_query_params(self) -> str:
        """
        Build the query string, including the leading '?'.

        Returns:
            e.g. "?currentGymOnly=true&limit=10&offset=0"
        """
        params = [f"currentGymOnly={str(self.current_gym_only).lower()}"]
        if self.from_timestamp is not None:
            params.append(f"fromTimestamp={_query_value(format_round_trip(self.from_timestamp))}")
        params.append(f"limit={self.limit}")
        params.append(f"offset={self.offset}")
        if self.to_timestamp is not None:
            params.append(f"toTimestamp={_query_value(format_round_trip(self.to_timestamp))}")
        return "?" + "&".join(params)


@dataclass
class TasksRequest:
    """Filter for listing trainer tasks.

    `modified_since` is passed through verbatim, e.g. "2022-01-01T00:00:00Z".
    """
    modified_since: Optional[str] = None

    def to_query_params(self) -> str:
        if self.modified_since is None:
            return ""
        return f"?modifiedSince={_query_value(self.modified_since)}"
