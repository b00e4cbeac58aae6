"""Query helpers shared by the Sales repositories."""

PAGE_SIZE = 100


def fetch_all(queryset, page_size: int = PAGE_SIZE) -> list:
    """Drain ``queryset`` page by page.

    Protean querysets apply a default limit, so listing a whole collection
    has to page through it explicitly.
    """
    records = []
    offset = 0
    while True:
        page = queryset.offset(offset).limit(page_size).all().items
        records.extend(page)
        if len(page) < page_size:
            return records
        offset += page_size
