from __future__ import annotations

import math

from rest_framework.exceptions import ValidationError

MAX_PAGE_SIZE = 100


def _to_int(value) -> int | None:
    if value in (None, ''):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_pagination(request, default_limit: int = 10) -> tuple[int, int]:
    """Read ``page``/``limit`` query params; missing or non-numeric values fall back to defaults."""
    page = _to_int(request.query_params.get('page')) or 1
    limit = _to_int(request.query_params.get('limit')) or default_limit
    if page < 1:
        raise ValidationError('Page must be greater than 0')
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise ValidationError(f'Limit must be between 1 and {MAX_PAGE_SIZE}')
    return page, limit


def paginate(request, queryset, serializer_class, *, key: str, default_limit: int = 10, context=None) -> dict:
    """Slice ``queryset`` for the requested page.

    A page past the end yields an empty list rather than an error.
    """
    page, limit = parse_pagination(request, default_limit)
    total = queryset.count()
    offset = (page - 1) * limit
    rows = list(queryset[offset:offset + limit]) if offset < total else []
    return {
        key: serializer_class(rows, many=True, context=context or {'request': request}).data,
        'total': total,
        'page': page,
        'limit': limit,
        'totalPages': math.ceil(total / limit),
    }
