from django.test import RequestFactory
from rest_framework.request import Request

from mdm_core.common.api.pagination import PageLimitPagination
from mdm_core.tasks.api.pagination import TaskPagination

ROWS = list(range(25))


def _request(**params) -> Request:
    return Request(RequestFactory().get("/api/rows", params))


def _page(paginator, **params):
    rows = paginator.paginate_queryset(ROWS, _request(**params))
    return rows, paginator.get_paginated_response(rows).data


def test_defaults_when_absent():
    rows, body = _page(PageLimitPagination())
    assert rows == list(range(10))
    assert body == {"data": list(range(10)), "total": 25, "page": 1, "limit": 10}


def test_second_page():
    rows, body = _page(PageLimitPagination(), page="2", limit="10")
    assert rows == list(range(10, 20))
    assert (body["total"], body["page"], body["limit"]) == (25, 2, 10)


def test_page_floor_and_limit_clamp():
    _, body = _page(PageLimitPagination(), page="0", limit="500")
    assert (body["page"], body["limit"]) == (1, 50)

    _, body = _page(PageLimitPagination(), page="-3", limit="-5")
    assert (body["page"], body["limit"]) == (1, 1)


def test_non_numeric_values_fall_back():
    _, body = _page(PageLimitPagination(), page="abc", limit="lots")
    assert (body["page"], body["limit"]) == (1, 10)


def test_page_past_the_end_is_empty_not_an_error():
    rows, body = _page(PageLimitPagination(), page="9", limit="10")
    assert rows == []
    assert body["total"] == 25


def test_task_pagination_uses_page_size_and_its_own_bounds():
    rows, body = _page(TaskPagination(), pageSize="250")
    assert len(rows) == 25
    assert body == {"tasks": ROWS, "totalCount": 25}

    rows, _ = _page(TaskPagination(), pageSize="0", page="3")
    assert rows == [2]
