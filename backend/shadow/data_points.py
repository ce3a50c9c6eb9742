"""Summary tiles shown before identity verification."""

from models.scan import DataPoint, ScanResult


def _exposed_type(result: ScanResult, *needles: str) -> bool:
    return any(
        needle in t.lower()
        for t in result.exposed_data_types
        for needle in needles
    )


def derive_data_points(result: ScanResult) -> list[DataPoint]:
    """
    Project a scan onto six fixed categories.

    Location and Phone never carry details, even when exposed.
    """
    has_email = _exposed_type(result, "email")
    has_social = len(result.profiles) > 0
    has_location = _exposed_type(result, "location", "geographic", "physical address")
    has_phone = _exposed_type(result, "phone")
    has_passwords = result.risk_breakdown.passwords_exposed

    return [
        DataPoint(
            id=1,
            label="Email",
            type="identity",
            exposed=has_email,
            details=f"Found in {len(result.breaches)} breaches" if has_email else None,
        ),
        DataPoint(
            id=2,
            label="Social Media",
            type="social",
            exposed=has_social,
            details=f"{len(result.profiles)} profiles found" if has_social else None,
        ),
        DataPoint(id=3, label="Location", type="location", exposed=has_location),
        DataPoint(id=4, label="Phone", type="contact", exposed=has_phone),
        DataPoint(
            id=5,
            label="Passwords",
            type="credential",
            exposed=has_passwords,
            details="CRITICAL: Passwords leaked!" if has_passwords else None,
        ),
        DataPoint(
            id=6,
            label="Websites",
            type="web",
            exposed=len(result.profiles) > 2,
            details=f"Linked to {', '.join(b.domain for b in result.breaches)}",
        ),
    ]
