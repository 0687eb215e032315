"""Tests for offset/size pagination."""

from __future__ import annotations

import pytest

from shared.domain.errors import ValidationError
from shared.infrastructure.pagination import PageRequest, page_params


@pytest.mark.parametrize(
    "offset, size, expected",
    [
        (0, 10, list(range(0, 10))),
        (10, 10, list(range(10, 20))),
        (15, 10, list(range(10, 20))),
        (20, 10, []),
        (4, 3, [3, 4, 5]),
    ],
)
def test_offset_lands_on_containing_page(offset, size, expected):
    rows = list(range(20))

    assert list(PageRequest(offset=offset, size=size).apply(rows)) == expected


@pytest.mark.parametrize("offset, size", [(-1, 10), (0, 0), (0, -3)])
def test_invalid_page_rejected(offset, size):
    with pytest.raises(ValidationError):
        PageRequest(offset=offset, size=size)


def test_page_params_defaults_and_parsing(settings):
    settings.SHAREIT_DEFAULT_PAGE_SIZE = 10

    assert page_params({}) == (0, 10)
    assert page_params({"from": "5", "size": ""}) == (5, 10)
    assert page_params({"from": "-2", "size": "0"}) == (-2, 0)


def test_non_integer_parameter():
    with pytest.raises(ValidationError) as excinfo:
        PageRequest.from_query({"size": "ten"})

    assert excinfo.value.message == "Parameter 'size' must be an integer"
