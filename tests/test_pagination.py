"""Tests for page request parsing."""

import pytest

from app.exceptions import ValidationFailure
from app.schemas.pagination import PageRequest


def test_defaults_to_insertion_order():
    request = PageRequest.from_query(0, 20)
    assert request.sort_field == "id"
    assert request.descending is False


@pytest.mark.parametrize(
    "sort, field, descending",
    [
        ("title", "title", False),
        ("dueDate,desc", "dueDate", True),
        ("createdAt, ASC", "createdAt", False),
        ("status,", "status", False),
    ],
)
def test_parses_sort_expression(sort, field, descending):
    request = PageRequest.from_query(1, 5, sort)
    assert request.sort_field == field
    assert request.descending is descending


def test_offset_is_page_times_size():
    assert PageRequest(page=3, size=10).offset == 30


def test_rejects_unknown_sort_field():
    with pytest.raises(ValidationFailure) as excinfo:
        PageRequest.from_query(0, 10, "owner,asc")
    assert excinfo.value.details == {"field": "sort"}


def test_rejects_unknown_direction():
    with pytest.raises(ValidationFailure):
        PageRequest.from_query(0, 10, "title,sideways")
