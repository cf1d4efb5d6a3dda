from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List

from rest_framework import serializers

MAX_PAGE_SIZE = 500


@dataclass
class Page:
    items: List[Any]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_more(self) -> bool:
        return self.page * self.limit < self.total

    def meta(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "hasMore": self.has_more,
        }


def paginate(queryset, *, page: int, limit: int) -> Page:
    total = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset:offset + limit])
    return Page(items=items, total=total, page=page, limit=limit)


class ListQuerySerializer(serializers.Serializer):
    """
    Validate the paging and sorting half of a list query string.

    Subclasses map public ``sortBy`` names onto model fields via ``sort_fields`` and
    pick their own defaults. Ties are always broken newest first.
    """

    sort_fields: Dict[str, str] = {"createdAt": "created_at"}
    default_limit = 10
    default_sort_by = "createdAt"
    default_sort_order = "desc"

    page = serializers.IntegerField(min_value=1, required=False)
    limit = serializers.IntegerField(min_value=1, max_value=MAX_PAGE_SIZE, required=False)
    sortBy = serializers.CharField(required=False)
    sortOrder = serializers.ChoiceField(choices=["asc", "desc"], required=False)

    def validate_sortBy(self, value):
        if value not in self.sort_fields:
            allowed = ", ".join(self.sort_fields)
            raise serializers.ValidationError(f"Must be one of: {allowed}.")
        return value

    def validate(self, attrs):
        attrs.setdefault("page", 1)
        attrs.setdefault("limit", self.default_limit)
        attrs.setdefault("sortBy", self.default_sort_by)
        attrs.setdefault("sortOrder", self.default_sort_order)
        return attrs

    def ordering(self) -> List[str]:
        data = self.validated_data
        field = self.sort_fields[data["sortBy"]]
        prefix = "-" if data["sortOrder"] == "desc" else ""
        ordering = [f"{prefix}{field}"]
        if field != "created_at":
            ordering.append("-created_at")
        ordering.append("-id")
        return ordering

    def paginate(self, queryset) -> Page:
        data = self.validated_data
        return paginate(queryset.order_by(*self.ordering()), page=data["page"], limit=data["limit"])


def validated_list_query(serializer_class, request) -> ListQuerySerializer:
    serializer = serializer_class(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer
