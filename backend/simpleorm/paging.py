import math


def total_pages(count, per_page):
    if per_page <= 0:
        raise ValueError(f"Page size must be positive, got {per_page}")
    return math.ceil(count / per_page)


def clamp_page(page, pages):
    """Clamp a 1-based page number into [1, pages]; anything but an int means page 1."""
    if not isinstance(page, int) or isinstance(page, bool):
        page = 1
    return max(1, min(page, pages))


def page_offset(page, per_page):
    return (page - 1) * per_page
