import bleach


def format_datetime(datetime_obj):
    """Format datetime to a readable string."""
    if not datetime_obj:
        return None
    return datetime_obj.strftime('%Y-%m-%d %H:%M:%S')


def sanitize_text(value):
    """Strip all markup from user supplied text."""
    return bleach.clean(value or "", tags=[], strip=True).strip()
