"""Page request parsing for list endpoints."""
from dataclasses import dataclass
from typing import Optional

from app.exceptions import ValidationFailure

# Wire names clients may sort by
SORTABLE_FIELDS = ("id", "title", "status", "dueDate", "createdAt")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and sort order."""
    page: int = 0
    size: int = 20
    sort_field: str = "id"
    descending: bool = False

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def from_query(cls, page: int, size: int, sort: Optional[str] = None) -> "PageRequest":
        """
        Build a page request from ``page``, ``size`` and ``sort=field[,asc|desc]``.

        Raises:
            ValidationFailure: If the sort field or direction is not supported
        """
        if not sort:
            return cls(page=page, size=size)

        field, _, direction = sort.partition(",")
        field = field.strip()
        direction = direction.strip().lower() or "asc"

        if field not in SORTABLE_FIELDS:
            raise ValidationFailure(
                f"Cannot sort by '{field}'; allowed fields: {', '.join(SORTABLE_FIELDS)}",
                field="sort",
            )
        if direction not in ("asc", "desc"):
            raise ValidationFailure(
                f"Invalid sort direction '{direction}'; use asc or desc",
                field="sort",
            )
        return cls(page=page, size=size, sort_field=field, descending=direction == "desc")
