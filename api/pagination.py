from __future__ import annotations

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from courses.constants import ITEMS_PER_PAGE


class EnvelopePagination(PageNumberPagination):
    """Page of 12 wrapped in the `{success, count, data}` envelope.

    `count` is the total across pages, not the size of this page.
    """

    page_size = ITEMS_PER_PAGE

    def get_paginated_response(self, data):
        return Response(
            {
                "success": True,
                "count": self.page.paginator.count,
                "data": data,
                "next": self.get_next_link(),
                "previous": self.get_previous_link(),
            }
        )

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "required": ["success", "count", "data"],
            "properties": {
                "success": {"type": "boolean", "example": True},
                "count": {"type": "integer", "example": 123},
                "data": schema,
                "next": {"type": "string", "nullable": True, "format": "uri"},
                "previous": {"type": "string", "nullable": True, "format": "uri"},
            },
        }
