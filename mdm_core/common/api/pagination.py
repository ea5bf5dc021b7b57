# mdm_core/common/api/pagination.py
from __future__ import annotations

from typing import Any

from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


def _int_or_default(raw, default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class PageLimitPagination(PageNumberPagination):
    """
    ?page=&limit= pagination with the list contract { data, total, page, limit }.

    Bad input never fails the request: non-numeric values fall back to the
    defaults, page is at least 1, limit is clamped into [1, max_page_size],
    and a page past the end is empty with the real total.
    """
    page_query_param = "page"
    page_size_query_param = "limit"

    # keys into settings.MDM
    default_size_setting = "DEFAULT_PAGE_LIMIT"
    max_size_setting = "MAX_PAGE_LIMIT"

    def __init__(self):
        self.page_size = settings.MDM[self.default_size_setting]
        self.max_page_size = settings.MDM[self.max_size_setting]
        self.page_index = 1
        self.total = 0

    def get_page_size(self, request) -> int:
        raw = request.query_params.get(self.page_size_query_param)
        return clamp(_int_or_default(raw, self.page_size), 1, self.max_page_size)

    def get_page_index(self, request) -> int:
        return max(1, _int_or_default(request.query_params.get(self.page_query_param), 1))

    def paginate_queryset(self, queryset, request, view=None) -> list[Any]:
        self.request = request
        self.limit = self.get_page_size(request)
        self.page_index = self.get_page_index(request)

        paginator = self.django_paginator_class(queryset, self.limit)
        self.total = paginator.count

        offset = (self.page_index - 1) * self.limit
        return list(paginator.object_list[offset: offset + self.limit])

    def get_paginated_response(self, data) -> Response:
        return Response(
            {
                "data": data,
                "total": self.total,
                "page": self.page_index,
                "limit": self.limit,
            }
        )
