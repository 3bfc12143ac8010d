from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RecordFilter:
    """
    Normalized list filter: an inclusive timestamp window plus one category value.

    Built once per request by the list query schemas, then translated into
    SQL predicates by ``apply``.
    """

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    category: Optional[str] = None

    def apply(self, query, timestamp_column, category_column=None):
        if self.start is not None:
            query = query.filter(timestamp_column >= self.start)
        if self.end is not None:
            query = query.filter(timestamp_column <= self.end)
        if self.category is not None and category_column is not None:
            query = query.filter(category_column == self.category)
        return query


NO_FILTER = RecordFilter()
