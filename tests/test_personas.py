from datetime import timezone

import pytest

from shadow.personas import (
    DEFAULT_PERSONA,
    PERSONAS,
    Persona,
    match_persona,
    select_persona,
)
from shadow.risk import check_score_invariant


@pytest.mark.parametrize("query, name", [
    ("john.doe@company.com", "John Doe"),
    ("  JOHNNY  ", "John Doe"),
    ("sarah.c@techcorp.io", "Sarah Chen"),
    ("bitcoin_whale", "Alex Rivera"),
    ("night.nurse", "Emily Watson"),
    ("zz_top", "Demo User"),
])
def test_keyword_selection(query, name):
    assert match_persona(query).name == name


def test_first_match_in_list_order_wins():
    # "john" (John Doe) and "crypto" (Alex Rivera) both match
    assert match_persona("john_crypto").name == "John Doe"


def test_default_persona_is_last_and_untagged():
    assert PERSONAS[-1] is DEFAULT_PERSONA
    assert DEFAULT_PERSONA.keywords == ()
    assert all(p.keywords for p in PERSONAS[:-1])


def test_match_is_total_for_custom_lists():
    fallback = Persona(name="Only", keywords=(), template=DEFAULT_PERSONA.template, narrative="")
    assert match_persona("anything", (fallback,)) is fallback


def test_john_doe_scenario():
    result, narrative = select_persona("john.doe@company.com")

    assert result.risk_score == 78
    assert result.risk_breakdown.passwords_exposed is True
    assert narrative.startswith("**CREDENTIAL ATTACK**")


def test_selection_is_deterministic():
    first, first_narrative = select_persona("Sarah.Chen@TechCorp.io")
    for _ in range(5):
        again, narrative = select_persona("Sarah.Chen@TechCorp.io")
        assert again.model_dump(exclude={"timestamp"}) == first.model_dump(exclude={"timestamp"})
        assert narrative == first_narrative


def test_query_and_timestamp_are_request_specific():
    result, _ = select_persona("  Emily.Watson  ")
    template = match_persona("emily").template

    assert result.query == "  Emily.Watson  "
    assert result.timestamp != template.timestamp
    assert result.timestamp.tzinfo == timezone.utc
    assert result.model_dump(exclude={"query", "timestamp"}) == template.model_dump(exclude={"query", "timestamp"})


def test_selected_result_does_not_alias_template():
    result, _ = select_persona("alex")
    template = match_persona("alex").template

    assert result.breaches is not template.breaches
    assert result.profiles is not template.profiles


@pytest.mark.parametrize("persona", PERSONAS, ids=lambda p: p.name)
def test_persona_templates_are_consistent(persona):
    check_score_invariant(persona.template)
