"""Canonical records produced by the breach and profile sources."""

from pydantic import BaseModel
from typing import Optional
from enum import Enum


class Platform(str, Enum):
    LINKEDIN = "LinkedIn"
    TWITTER = "Twitter/X"
    FACEBOOK = "Facebook"
    INSTAGRAM = "Instagram"
    GITHUB = "GitHub"
    REDDIT = "Reddit"
    TIKTOK = "TikTok"
    YOUTUBE = "YouTube"
    WEBSITE = "Website"


class QueryType(str, Enum):
    EMAIL = "email"
    USERNAME = "username"


class BreachRecord(BaseModel):
    """One breach source matched for a query."""
    name: str
    domain: str
    breach_date: str = "Unknown"
    data_classes: list[str] = []
    description: str = ""
    pwn_count: int = 0

    class Config:
        frozen = True


class ProfileRecord(BaseModel):
    """A public profile. `url` is the identity key within one result."""
    platform: str
    url: str
    title: str = ""
    snippet: str = ""

    class Config:
        frozen = True


class PersonalInfo(BaseModel):
    """Sparse bag of discovered facts. None means not found."""
    location: Optional[str] = None
    employer: Optional[str] = None
    education: Optional[str] = None
    field_of_study: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    known_aliases: Optional[list[str]] = None
    websites: Optional[list[str]] = None
    date_of_birth: Optional[str] = None
    family_members: Optional[list[str]] = None
    financial_info: Optional[str] = None
    recent_travel: Optional[list[str]] = None
    property_value: Optional[str] = None
    vehicle_info: Optional[str] = None

    class Config:
        frozen = True
