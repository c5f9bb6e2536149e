# SPDX-License-Identifier: MIT

from typing import Optional
from urllib.parse import urlsplit

import pendulum

from daybook.time import date_from_key, date_to_key

DEFAULT_SCHEME = "daybook"
DATE_HOST = "date"


def date_url(date: pendulum.Date, scheme: str = DEFAULT_SCHEME) -> str:
    return f"{scheme}://{DATE_HOST}/{date_to_key(date)}"


def parse_date_url(url: str, scheme: str = DEFAULT_SCHEME) -> Optional[pendulum.Date]:
    """
    Parse a link of the form scheme://date/YYYY-MM-DD.

    Returns:
        The linked date, or None when the link is not a valid date link
    """
    parts = urlsplit(url.strip())
    if parts.scheme.lower() != scheme.lower() or parts.netloc.lower() != DATE_HOST:
        return None
    return date_from_key(parts.path.strip("/"))
