from shadow.data_points import derive_data_points
from shadow.orchestrator import build_scan_result
from shadow.personas import select_persona

from conftest import make_breach, make_profile


def by_label(points):
    return {p.label: p for p in points}


def test_six_categories_in_fixed_order():
    points = derive_data_points(build_scan_result("jdoe", [], []))

    assert [p.label for p in points] == ["Email", "Social Media", "Location", "Phone", "Passwords", "Websites"]
    assert [p.id for p in points] == [1, 2, 3, 4, 5, 6]


def test_clean_scan_exposes_nothing():
    points = by_label(derive_data_points(build_scan_result("jdoe", [], [])))

    assert not any(p.exposed for p in points.values())
    assert points["Email"].details is None
    assert points["Passwords"].details is None


def test_location_and_phone_never_reveal_details():
    result, _ = select_persona("alex")

    points = by_label(derive_data_points(result))

    assert points["Location"].exposed is True
    assert points["Phone"].exposed is True
    assert points["Location"].details is None
    assert points["Phone"].details is None


def test_exposed_categories_carry_details():
    breaches = [
        make_breach("Adobe", "Email addresses", "Passwords"),
        make_breach("Canva", "Geographic locations"),
    ]
    profiles = [make_profile("GitHub"), make_profile("Reddit"), make_profile("TikTok")]

    points = by_label(derive_data_points(build_scan_result("jdoe", breaches, profiles)))

    assert points["Email"].details == "Found in 2 breaches"
    assert points["Social Media"].details == "3 profiles found"
    assert points["Passwords"].details == "CRITICAL: Passwords leaked!"
    assert points["Websites"].exposed is True
    assert points["Websites"].details == "Linked to adobe.com, canva.com"
    assert points["Phone"].exposed is False


def test_personal_info_does_not_leak_into_projection():
    result, _ = select_persona("emily")
    assert result.personal_info.location

    points = by_label(derive_data_points(result))

    # Emily's breaches carry no location data class
    assert points["Location"].exposed is False


def test_email_addresses_alone_do_not_expose_location():
    breaches = [make_breach("Acme", "Email addresses")]

    points = by_label(derive_data_points(build_scan_result("jdoe", breaches, [])))

    assert points["Email"].exposed is True
    assert points["Location"].exposed is False


def test_physical_addresses_expose_location():
    breaches = [make_breach("Acme", "Email addresses", "Physical addresses")]

    points = by_label(derive_data_points(build_scan_result("jdoe", breaches, [])))

    assert points["Location"].exposed is True
