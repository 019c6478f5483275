from blog_api.utils.helpers import get_summary, host, parse_datetime, utc_now

__all__ = ["get_summary", "host", "parse_datetime", "utc_now"]
