"""
Helper utilities for sender authorization
"""

from typing import Iterable, Optional, Union


def is_authorized(user_id: Optional[Union[int, str]], admin_ids: Iterable[str]) -> bool:
    """Check a sender id against the admin allow-list"""
    if user_id is None:
        return False
    return str(user_id) in admin_ids
