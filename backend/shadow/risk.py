"""Risk score calculation."""

from enum import Enum
from pydantic import BaseModel

from models.records import BreachRecord, ProfileRecord
from models.scan import RiskBreakdown, ScanResult
from .errors import ScoringInvariantViolation


MAX_SCORE = 100


class RiskLevel(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class RiskWeights(BaseModel):
    """Point values for every scoring rule. Override per orchestrator."""

    # Breach-related
    per_breach: int = 5
    password_leaked: int = 50
    email_in_breach: int = 30
    phone_exposed: int = 15
    address_exposed: int = 20
    financial_exposed: int = 40

    # Social media, first matching label substring wins
    platforms: dict[str, int] = {
        "linkedin": 10,
        "twitter": 10,
        "x": 10,
        "facebook": 10,
        "instagram": 8,
        "github": 5,
        "reddit": 5,
        "tiktok": 8,
        "youtube": 5,
    }
    other_profile: int = 5

    class Config:
        frozen = True


DEFAULT_WEIGHTS = RiskWeights()

PASSWORD_CLASSES = {"passwords", "password hints"}
ADDRESS_CLASSES = {"physical addresses", "geographic locations"}
FINANCIAL_CLASSES = {"financial data", "credit cards"}


def platform_weight(platform: str, weights: RiskWeights = DEFAULT_WEIGHTS) -> int:
    label = platform.lower()
    for keyword, points in weights.platforms.items():
        if keyword in label:
            return points
    return weights.other_profile


def calculate_risk_score(
    breaches: list[BreachRecord],
    profiles: list[ProfileRecord],
    weights: RiskWeights = DEFAULT_WEIGHTS,
) -> tuple[int, RiskBreakdown]:
    """
    Calculate overall risk score from breaches and profiles.

    Scoring:
    - Every breach: +per_breach to breach exposure
    - Data classes seen across all breaches (each rule fires at most once):
      - passwords / password hints: +50 breach exposure, passwords flag
      - email addresses: +30 breach exposure
      - phone numbers: +15 contact info
      - physical addresses / geographic locations: +20 location
      - financial data / credit cards: +40 breach exposure
    - Every profile: platform weight to social media visibility

    Input order does not matter.

    Returns:
        Tuple of (score 0-100, breakdown)
    """
    breach_exposure = 0
    social = 0
    contact = 0
    location = 0

    data_classes: set[str] = set()
    for breach in breaches:
        breach_exposure += weights.per_breach
        data_classes.update(dc.lower() for dc in breach.data_classes)

    passwords_exposed = bool(data_classes & PASSWORD_CLASSES)
    if passwords_exposed:
        breach_exposure += weights.password_leaked

    if "email addresses" in data_classes:
        breach_exposure += weights.email_in_breach

    if "phone numbers" in data_classes:
        contact += weights.phone_exposed

    if data_classes & ADDRESS_CLASSES:
        location += weights.address_exposed

    if data_classes & FINANCIAL_CLASSES:
        breach_exposure += weights.financial_exposed

    for profile in profiles:
        social += platform_weight(profile.platform, weights)

    breakdown = RiskBreakdown(
        breach_exposure=breach_exposure,
        social_media_visibility=social,
        contact_info_leakage=contact,
        location_data=location,
        passwords_exposed=passwords_exposed,
    )

    # Cap at 100
    score = min(MAX_SCORE, breakdown.total)
    return score, breakdown


def check_score_invariant(result: ScanResult) -> None:
    """Raise if the stored score disagrees with its breakdown."""
    expected = min(MAX_SCORE, result.risk_breakdown.total)
    if result.risk_score != expected or not 0 <= result.risk_score <= MAX_SCORE:
        raise ScoringInvariantViolation(
            f"risk_score={result.risk_score} but breakdown sums to {expected}"
        )


def collect_exposed_data_types(breaches: list[BreachRecord]) -> list[str]:
    """Union of data classes, first-seen order and spelling."""
    seen: set[str] = set()
    exposed: list[str] = []
    for breach in breaches:
        for dc in breach.data_classes:
            key = dc.lower()
            if key not in seen:
                seen.add(key)
                exposed.append(dc)
    return exposed


def has_password_exposed(breaches: list[BreachRecord]) -> bool:
    return any(
        dc.lower() in PASSWORD_CLASSES
        for b in breaches
        for dc in b.data_classes
    )


def get_risk_level(score: int) -> RiskLevel:
    if score >= 70:
        return RiskLevel.CRITICAL
    if score >= 50:
        return RiskLevel.HIGH
    if score >= 30:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def get_recommendations(breakdown: RiskBreakdown) -> list[str]:
    recommendations: list[str] = []

    if breakdown.passwords_exposed:
        recommendations.append("Change passwords on all accounts immediately and enable 2FA")

    if breakdown.breach_exposure > 30:
        recommendations.append("Monitor your accounts for suspicious activity")
        recommendations.append("Consider using a password manager with unique passwords")

    if breakdown.social_media_visibility > 20:
        recommendations.append("Review privacy settings on social media accounts")
        recommendations.append("Limit publicly visible personal information")

    if breakdown.contact_info_leakage > 0:
        recommendations.append("Be cautious of phishing attempts via phone or SMS")

    if breakdown.location_data > 0:
        recommendations.append("Disable location tagging on social media posts")

    return recommendations


def get_risk_bar(score: int, width: int = 30) -> str:
    """Generate ASCII risk bar."""
    filled = int((score / 100) * width)
    empty = width - filled

    if score >= 70:
        char = '#'
    elif score >= 50:
        char = '='
    elif score >= 30:
        char = '-'
    else:
        char = '.'

    return f"[{char * filled}{' ' * empty}] {score}/100"
