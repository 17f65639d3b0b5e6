"""
Small helpers shared across blueprints.
"""

from datetime import datetime, timezone
from math import ceil


def utcnow():
    """Naive UTC timestamp, matching what SQLite round-trips."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_page(value):
    """Page number from a query-string value, never below 1."""
    try:
        return max(1, int(value or 1))
    except (TypeError, ValueError):
        return 1


def paginate(items, page, per_page):
    """Slice `items` for `page` and describe the result for templates.

    Returns a tuple of (page_items, pagination) where pagination carries
    1-based start/end indexes of the visible slice.
    """
    total = len(items)
    start = (page - 1) * per_page
    total_pages = ceil(total / per_page) if per_page else 0

    pagination = {
        'current_page': page,
        'total_pages': total_pages,
        'total': total,
        'per_page': per_page,
        'has_next_page': page < total_pages,
        'has_prev_page': page > 1,
        'start_index': start + 1,
        'end_index': min(page * per_page, total),
    }
    return items[start:start + per_page], pagination


def empty_pagination(per_page):
    return {
        'current_page': 1,
        'total_pages': 0,
        'total': 0,
        'per_page': per_page,
        'has_next_page': False,
        'has_prev_page': False,
        'start_index': 0,
        'end_index': 0,
    }
