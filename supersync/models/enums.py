"""Enums for model fields."""

from enum import Enum


class EmailProvider(str, Enum):
    """Mail providers a user can sync from."""

    GMAIL = "gmail"
    OUTLOOK = "outlook"
    YAHOO = "yahoo"
    OTHER = "other"


class LeadSource(str, Enum):
    """Where a contact came from."""

    WEBSITE = "website"
    EMAIL = "email"
    REFERRAL = "referral"
    SOCIAL = "social"
    OTHER = "other"
