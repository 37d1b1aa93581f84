"""
Syntactic checks on signup input. No DNS or mailbox lookups.
"""

import re
from typing import Optional

from libs.result import Error, Result, Return

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MISSING_FIELDS = "MISSING_FIELDS"
INVALID_EMAIL = "INVALID_EMAIL"


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def validate_signup(name: Optional[str], email: Optional[str]) -> Result[None]:
    """
    Check that name and email are present and that email looks like
    local-part@domain.tld.

    Returns:
        Result[None], or Error(MISSING_FIELDS) / Error(INVALID_EMAIL)
    """
    if is_blank(name) or is_blank(email):
        return Return.err(Error(MISSING_FIELDS, "Missing required fields"))

    if not is_valid_email(email.strip()):
        return Return.err(Error(INVALID_EMAIL, "Invalid email address"))

    return Return.ok()
