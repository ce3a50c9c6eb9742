import httpx

from services.narrator import NarratorService, fallback_narrative, format_prompt_data
from shadow.orchestrator import build_scan_result
from shadow.personas import select_persona

from conftest import make_breach, make_profile


async def test_missing_key_uses_fallback():
    result, _ = select_persona("john")

    narrative = await NarratorService(api_key=None).generate(result)

    assert narrative.is_ai_generated is False
    assert narrative.narrative == fallback_narrative(result)


def test_fallback_mentions_found_data():
    result, _ = select_persona("john")

    text = fallback_narrative(result)

    assert "LinkedIn and Twitter/X" in text
    assert "location in San Francisco, CA" in text
    assert "**CREDENTIAL ATTACK**" in text


def test_fallback_without_passwords_or_profiles():
    result = build_scan_result("jdoe", [make_breach("A", "Email addresses")], [])

    text = fallback_narrative(result)

    assert "public profile" in text
    assert "**CREDENTIAL ATTACK**" not in text
    assert text.endswith("build a fake profile of you.")


def test_prompt_data_summarizes_scan():
    result = build_scan_result(
        "a@b.com",
        [make_breach("Adobe", "Email addresses", "Passwords")],
        [make_profile("GitHub", "https://github.com/ab")],
    )

    data = format_prompt_data(result)

    assert "Target: a@b.com (email)" in data
    assert "- Adobe (Unknown): Email addresses, Passwords" in data
    assert "- GitHub: https://github.com/ab" in data
    assert data.endswith("PASSWORDS LEAKED: YES")


async def test_model_text_is_returned():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["key"] == "k"
        return httpx.Response(200, json={
            "candidates": [{"content": {"parts": [{"text": "**PLAYBOOK**"}]}}],
        })

    service = NarratorService(api_key="k", transport=httpx.MockTransport(handler))
    result, _ = select_persona("sarah")

    narrative = await service.generate(result)

    assert narrative.is_ai_generated is True
    assert narrative.narrative == "**PLAYBOOK**"


async def test_model_errors_degrade_to_fallback():
    result, _ = select_persona("sarah")
    for response in (
        httpx.Response(500, text="boom"),
        httpx.Response(200, json={"candidates": []}),
        httpx.Response(200, text="not json"),
    ):
        service = NarratorService(api_key="k", transport=httpx.MockTransport(lambda r, resp=response: resp))
        narrative = await service.generate(result)
        assert narrative.is_ai_generated is False
        assert narrative.narrative == fallback_narrative(result)
