import httpx
from datetime import datetime, timezone
from typing import Optional

from config import settings
from models.scan import ScanResult
from models.responses import NarrativeResult


PLACEHOLDER_KEY = "your_gemini_key_here"

SYSTEM_PROMPT = """You are a high-level security consultant. Write a detailed "Attacker's Playbook" titled "THE ATTACKER'S PLAN" based on the user data provided.

Analyze the data and identify at least 3 specific attack scenarios. For each scenario, explicitly link what data was found to how it can be abused.

Use exactly this structure for EACH attack scenario:

**[ATTACK NAME] ATTACK**
[A short sentence using the format: "Because your [Found Data] was revealed, hackers could [Specific Attack Action] to [Potential Outcome]."]
- [Specific step 1 regarding how this data makes you vulnerable]
- [Specific step 2 regarding how this data makes you vulnerable]

Rules:
- Be highly specific and personalized to the data.
- Write like you're explaining to a friend. No fluff or extra commentary.
- Use "you" and "your" consistently.
- Exactly 2 bullet points per attack section.
- Never use jargon like "credential stuffing" or "attack vector"."""


def fallback_narrative(result: ScanResult) -> str:
    """Templated playbook used whenever the model is unavailable."""
    platforms = " and ".join(p.platform for p in result.profiles[:2])
    location = result.personal_info.location if result.personal_info else None

    sections = [
        "**SOCIAL ENGINEERING ATTACK**\n"
        f"Because your {platforms or 'public profile'} details and "
        f"{'location in ' + location if location else 'interests'} were revealed, "
        "hackers could craft a convincing message to steal your keys.\n"
        "- They pose as a trusted neighbor or a local support agent.\n"
        "- They use your public interests to make the trick feel personal."
    ]

    if result.risk_breakdown.passwords_exposed:
        sections.append(
            "**CREDENTIAL ATTACK**\n"
            "Because your leaked passwords from past breaches were revealed, "
            "hackers could break into your current primary accounts.\n"
            "- They use automated tools to try your password on banking and social media.\n"
            "- Reusing passwords across different sites is the biggest vulnerability here."
        )

    sections.append(
        "**IDENTITY IMPERSONATION**\n"
        f"Because enough public details like your name and {location or 'online handles'} "
        "were revealed, someone could try to pose as you to access private info.\n"
        "- They contact companies you use and try to \"verify\" your identity.\n"
        "- They piece together your bio and location to build a fake profile of you."
    )

    return "\n\n".join(sections)


def format_prompt_data(result: ScanResult) -> str:
    lines = [
        f"Target: {result.query} ({result.query_type})",
        f"Risk Score: {result.risk_score}/100",
        "",
    ]

    if result.breaches:
        lines.append(f"DATA BREACHES ({len(result.breaches)}):")
        lines += [f"- {b.name} ({b.breach_date}): {', '.join(b.data_classes)}" for b in result.breaches]
        lines.append("")

    if result.profiles:
        lines.append(f"PUBLIC PROFILES ({len(result.profiles)}):")
        lines += [f"- {p.platform}: {p.url}" for p in result.profiles]
        lines.append("")

    info = result.personal_info
    if info:
        lines.append("SENSITIVE PERSONAL INFO FOUND:")
        if info.location:
            lines.append(f"- Location: {info.location}")
        if info.employer:
            lines.append(f"- Employer: {info.employer}")
        if info.family_members:
            lines.append(f"- Family: {', '.join(info.family_members)}")
        if info.date_of_birth:
            lines.append(f"- DOB: {info.date_of_birth}")
        if info.financial_info:
            lines.append(f"- Financial: {info.financial_info}")
        if info.recent_travel:
            lines.append(f"- Travel: {', '.join(info.recent_travel)}")
        if info.vehicle_info:
            lines.append(f"- Vehicle: {info.vehicle_info}")
        lines.append("")

    lines.append(f"EXPOSED DATA TYPES: {', '.join(result.exposed_data_types)}")
    lines.append(f"PASSWORDS LEAKED: {'YES' if result.risk_breakdown.passwords_exposed else 'No'}")
    return "\n".join(lines)


class NarratorService:
    API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-2.0-flash-exp",
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def generate(self, result: ScanResult) -> NarrativeResult:
        """Never raises. Falls back to the template on any failure."""
        if not self.api_key or self.api_key == PLACEHOLDER_KEY:
            print("[Narrator] No valid API key, using fallback")
            return self._fallback(result)

        prompt = f"{SYSTEM_PROMPT}\n\n---\n\nUSER DATA:\n{format_prompt_data(result)}"

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                resp = await client.post(
                    self.API_URL.format(model=self.model),
                    params={"key": self.api_key},
                    json={"contents": [{"parts": [{"text": prompt}]}]},
                    timeout=self.timeout,
                )
            if resp.status_code != 200:
                print(f"[Narrator] API error: {resp.status_code}")
                return self._fallback(result)

            data = resp.json()
            narrative = data["candidates"][0]["content"]["parts"][0]["text"]
        except Exception as e:
            print(f"[Narrator] Error: {type(e).__name__}: {e}")
            return self._fallback(result)

        return NarrativeResult(
            narrative=narrative,
            generated_at=datetime.now(timezone.utc),
            is_ai_generated=True,
        )

    def _fallback(self, result: ScanResult) -> NarrativeResult:
        return NarrativeResult(
            narrative=fallback_narrative(result),
            generated_at=datetime.now(timezone.utc),
            is_ai_generated=False,
        )


narrator_service = NarratorService(
    api_key=settings.GEMINI_API_KEY,
    model=settings.GEMINI_MODEL,
)
