import itertools

import pytest

from models.scan import RiskBreakdown
from shadow.errors import ScoringInvariantViolation
from shadow.orchestrator import build_scan_result
from shadow.risk import (
    RiskLevel,
    RiskWeights,
    calculate_risk_score,
    check_score_invariant,
    collect_exposed_data_types,
    get_recommendations,
    get_risk_bar,
    get_risk_level,
    has_password_exposed,
    platform_weight,
)

from conftest import make_breach, make_profile


def test_empty_input_scores_zero():
    score, breakdown = calculate_risk_score([], [])

    assert score == 0
    assert breakdown == RiskBreakdown()
    assert breakdown.passwords_exposed is False


def test_unrecognized_data_classes_still_cost_flat_penalty():
    score, breakdown = calculate_risk_score([make_breach("Acme", "Usernames")], [])

    assert breakdown.breach_exposure == 5
    assert score == 5


def test_three_password_breaches_score_95():
    breaches = [
        make_breach(name, "Email addresses", "Passwords")
        for name in ("Adobe", "Dropbox", "Canva")
    ]

    score, breakdown = calculate_risk_score(breaches, [])

    assert breakdown.breach_exposure == 3 * 5 + 50 + 30
    assert score == 95
    assert breakdown.passwords_exposed is True


def test_each_rule_fires_once_regardless_of_breach_count():
    breaches = [make_breach(f"B{i}", "Phone numbers", "Geographic locations") for i in range(4)]

    _, breakdown = calculate_risk_score(breaches, [])

    assert breakdown.contact_info_leakage == 15
    assert breakdown.location_data == 20
    assert breakdown.breach_exposure == 20


def test_data_class_matching_is_case_insensitive():
    _, breakdown = calculate_risk_score(
        [make_breach("Acme", "PASSWORD HINTS", "credit cards", "Physical Addresses")], []
    )

    assert breakdown.passwords_exposed is True
    assert breakdown.breach_exposure == 5 + 50 + 40
    assert breakdown.location_data == 20


@pytest.mark.parametrize("platform, points", [
    ("LinkedIn", 10),
    ("Twitter/X", 10),
    ("Facebook", 10),
    ("Instagram", 8),
    ("GitHub", 5),
    ("Reddit", 5),
    ("TikTok", 8),
    ("YouTube", 5),
    ("Website", 5),
    ("Medium", 5),
])
def test_platform_weights(platform, points):
    assert platform_weight(platform) == points


def test_score_is_capped_at_100():
    breaches = [
        make_breach("Mega", "Email addresses", "Passwords", "Phone numbers",
                    "Physical addresses", "Financial data")
    ]
    profiles = [make_profile("LinkedIn", f"https://linkedin.com/in/{i}") for i in range(5)]

    score, breakdown = calculate_risk_score(breaches, profiles)

    assert breakdown.total > 100
    assert score == 100


def test_input_order_does_not_matter():
    breaches = [
        make_breach("A", "Passwords"),
        make_breach("B", "Phone numbers"),
        make_breach("C", "Email addresses"),
    ]
    profiles = [make_profile("GitHub"), make_profile("Instagram"), make_profile("Website")]

    expected = calculate_risk_score(breaches, profiles)
    for b_perm in itertools.permutations(breaches):
        for p_perm in itertools.permutations(profiles):
            assert calculate_risk_score(list(b_perm), list(p_perm)) == expected


def test_adding_breach_never_lowers_score():
    breaches = [make_breach("A", "Email addresses")]
    before, _ = calculate_risk_score(breaches, [])

    after, _ = calculate_risk_score(breaches + [make_breach("B", "Credit cards")], [])

    assert after >= before


def test_removing_profiles_never_raises_social_visibility():
    profiles = [make_profile("LinkedIn"), make_profile("TikTok")]
    _, with_profiles = calculate_risk_score([], profiles)
    _, without = calculate_risk_score([], [])

    assert without.social_media_visibility <= with_profiles.social_media_visibility


def test_password_flag_matches_data_classes():
    cases = [
        ([], False),
        ([make_breach("A", "Email addresses")], False),
        ([make_breach("A", "Password hashes")], False),
        ([make_breach("A", "passwords")], True),
        ([make_breach("A", "Names"), make_breach("B", "Password Hints")], True),
    ]
    for breaches, expected in cases:
        _, breakdown = calculate_risk_score(breaches, [])
        assert breakdown.passwords_exposed is expected
        assert has_password_exposed(breaches) is expected


def test_custom_weights_override_defaults():
    weights = RiskWeights(per_breach=1, password_leaked=10)

    score, breakdown = calculate_risk_score([make_breach("A", "Passwords")], [], weights)

    assert breakdown.breach_exposure == 11
    assert score == 11


def test_exposed_data_types_keep_first_spelling():
    breaches = [
        make_breach("A", "Email addresses", "Passwords"),
        make_breach("B", "email addresses", "Phone numbers"),
    ]

    assert collect_exposed_data_types(breaches) == ["Email addresses", "Passwords", "Phone numbers"]


def test_invariant_check_rejects_inconsistent_result():
    result = build_scan_result("someone", [make_breach("A", "Passwords")], [])
    check_score_invariant(result)

    broken = result.model_copy(update={"risk_score": 99})
    with pytest.raises(ScoringInvariantViolation):
        check_score_invariant(broken)


@pytest.mark.parametrize("score, level", [
    (0, RiskLevel.LOW),
    (29, RiskLevel.LOW),
    (30, RiskLevel.MODERATE),
    (50, RiskLevel.HIGH),
    (70, RiskLevel.CRITICAL),
    (100, RiskLevel.CRITICAL),
])
def test_risk_level_thresholds(score, level):
    assert get_risk_level(score) == level


def test_recommendations_follow_breakdown():
    breakdown = RiskBreakdown(
        breach_exposure=85,
        social_media_visibility=25,
        contact_info_leakage=15,
        location_data=0,
        passwords_exposed=True,
    )

    recs = get_recommendations(breakdown)

    assert recs[0].startswith("Change passwords")
    assert "Review privacy settings on social media accounts" in recs
    assert "Be cautious of phishing attempts via phone or SMS" in recs
    assert not any("location" in r for r in recs)
    assert get_recommendations(RiskBreakdown()) == []


def test_risk_bar():
    assert get_risk_bar(0, width=10) == "[          ] 0/100"
    assert get_risk_bar(80, width=10) == "[########  ] 80/100"
