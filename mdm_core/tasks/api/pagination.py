from rest_framework.response import Response

from mdm_core.common.api.pagination import PageLimitPagination


class TaskPagination(PageLimitPagination):
    """?page=&pageSize= (clamped to [1, 100]); responds with { tasks, totalCount }."""
    page_size_query_param = "pageSize"
    default_size_setting = "TASK_DEFAULT_PAGE_SIZE"
    max_size_setting = "TASK_MAX_PAGE_SIZE"

    def get_paginated_response(self, data) -> Response:
        return Response({"tasks": data, "totalCount": self.total})
