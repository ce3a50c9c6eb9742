"""
Demo personas.

Hand-authored scan results with pre-written narratives. Selection is by
keyword substring on the normalized query, first match in list order wins,
the untagged last persona is the fallback.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from models.records import BreachRecord, ProfileRecord, PersonalInfo, QueryType
from models.scan import RiskBreakdown, ScanResult


TEMPLATE_TIMESTAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Persona:
    name: str
    keywords: tuple[str, ...]
    template: ScanResult
    narrative: str

    def matches(self, normalized_query: str) -> bool:
        return any(k in normalized_query for k in self.keywords)


JOHN_DOE = Persona(
    name="John Doe",
    keywords=("john", "doe", "johndoe", "john.doe"),
    template=ScanResult(
        query="john.doe@company.com",
        query_type=QueryType.EMAIL,
        breaches=[
            BreachRecord(
                name="LinkedIn",
                domain="linkedin.com",
                breach_date="2021-06-22",
                data_classes=["Email addresses", "Names", "Phone numbers", "Professional info"],
                description="In June 2021, 700 million LinkedIn user records were scraped.",
                pwn_count=700000000,
            ),
            BreachRecord(
                name="Adobe",
                domain="adobe.com",
                breach_date="2013-10-04",
                data_classes=["Email addresses", "Passwords", "Password hints"],
                description="153 million Adobe accounts were breached with encrypted passwords.",
                pwn_count=153000000,
            ),
        ],
        profiles=[
            ProfileRecord(platform="LinkedIn", url="https://linkedin.com/in/johndoe",
                          title="John Doe - Software Engineer", snippet="Experienced developer with 10+ years..."),
            ProfileRecord(platform="Twitter/X", url="https://twitter.com/johndoe",
                          title="@johndoe", snippet="Tech enthusiast. Coffee lover. Bay Area."),
            ProfileRecord(platform="GitHub", url="https://github.com/johndoe",
                          title="johndoe (John Doe)", snippet="42 repositories, 156 followers"),
        ],
        exposed_data_types=["Email addresses", "Names", "Phone numbers", "Passwords", "Professional info"],
        risk_score=78,
        risk_breakdown=RiskBreakdown(
            breach_exposure=50,
            social_media_visibility=18,
            contact_info_leakage=5,
            location_data=5,
            passwords_exposed=True,
        ),
        timestamp=TEMPLATE_TIMESTAMP,
        personal_info=PersonalInfo(
            location="San Francisco, CA",
            employer="Acme Software Inc.",
            education="UC Berkeley",
            field_of_study="Computer Science, B.S.",
            phone="+1 (415) ***-**42",
            known_aliases=["johndoe", "john.doe", "jdoe_dev"],
            websites=["https://github.com/johndoe", "https://johndoe.dev"],
            date_of_birth="October 12, 1988",
            family_members=["Jane Doe (Spouse)", "Michael Doe (Brother)"],
            financial_info="Estimated Income: $140k - $160k",
            recent_travel=["Tokyo, Japan (Oct 2023)", "London, UK (Mar 2023)"],
            property_value="Est. Home Value: $1.2M",
            vehicle_info="2021 Tesla Model 3",
        ),
    ),
    narrative="""**CREDENTIAL ATTACK**
Because your old password from the 2013 Adobe leak was revealed, hackers could break into your current primary accounts to steal your data.
- Automated tools test your leaked credentials against hundreds of popular sites.
- If you still use that old password anywhere, those accounts are now high-priority targets.

**PHISHING ATTACK**
Because your LinkedIn details and role at Acme Software Inc. were revealed, hackers could craft a convincing fake message to trick you.
- They might pose as a colleague or manager to gain your immediate trust.
- The goal is to trick you into clicking a harmful link that installs malware on your work laptop.

**IMPERSONATION ATTACK**
Because your full name and public handles were revealed, hackers could build a fake profile of you to trick your professional network.
- They use your bio and career history to create an identical social media account.
- This fake "you" is then used to ask colleagues for sensitive info or internal documents.""",
)


SARAH_CHEN = Persona(
    name="Sarah Chen",
    keywords=("sarah", "chen", "manager", "tech manager", "sarahchen"),
    template=ScanResult(
        query="sarah.chen@techcorp.io",
        query_type=QueryType.EMAIL,
        breaches=[
            BreachRecord(
                name="Dropbox",
                domain="dropbox.com",
                breach_date="2012-07-01",
                data_classes=["Email addresses", "Passwords"],
                description="Dropbox suffered a data breach exposing 68 million accounts.",
                pwn_count=68648009,
            ),
            BreachRecord(
                name="Canva",
                domain="canva.com",
                breach_date="2019-05-24",
                data_classes=["Email addresses", "Names", "Usernames", "Geographic locations"],
                description="137 million Canva users had their data exposed.",
                pwn_count=137272116,
            ),
            BreachRecord(
                name="Twitter",
                domain="twitter.com",
                breach_date="2023-01-05",
                data_classes=["Email addresses", "Names", "Phone numbers"],
                description="Over 200 million Twitter records were leaked online.",
                pwn_count=211524284,
            ),
        ],
        profiles=[
            ProfileRecord(platform="LinkedIn", url="https://linkedin.com/in/sarahchen",
                          title="Sarah Chen - Engineering Manager at TechCorp", snippet="Leading a team of 15 engineers..."),
            ProfileRecord(platform="Twitter/X", url="https://twitter.com/sarahchentech",
                          title="@sarahchentech", snippet="Eng Manager @TechCorp | Speaker | Mom of 2"),
            ProfileRecord(platform="GitHub", url="https://github.com/sarahchen",
                          title="sarahchen", snippet="89 repositories, 2.1k followers"),
            ProfileRecord(platform="Medium", url="https://medium.com/@sarahchen",
                          title="Sarah Chen - Medium", snippet="Writing about engineering leadership..."),
        ],
        exposed_data_types=["Email addresses", "Names", "Phone numbers", "Passwords", "Geographic locations"],
        risk_score=92,
        risk_breakdown=RiskBreakdown(
            breach_exposure=60,
            social_media_visibility=22,
            contact_info_leakage=10,
            location_data=0,
            passwords_exposed=True,
        ),
        timestamp=TEMPLATE_TIMESTAMP,
        personal_info=PersonalInfo(
            location="Seattle, WA",
            employer="TechCorp",
            education="Stanford University",
            field_of_study="Computer Engineering, M.S.",
            phone="+1 (206) ***-**18",
            known_aliases=["sarahchen", "sarahchentech", "s.chen"],
            websites=["https://medium.com/@sarahchen"],
            family_members=["David Chen (Husband)", "Lily Chen (Daughter)", "Oliver Chen (Son)"],
            recent_travel=["Austin, TX (SXSW 2023)"],
            vehicle_info="2019 Subaru Outback",
        ),
    ),
    narrative="""**SIM SWAP ATTACK**
Because your phone number was revealed in the Twitter breach, hackers could hijack your mobile account to bypass security.
- Attackers trick your provider into transferring your number to a device they control.
- This lets them intercept the text-based login codes for your high-value bank and email accounts.

**EXECUTIVE IMPERSONATION**
Because your role at TechCorp and your team details are public, hackers could pose as an executive to commit financial fraud.
- Someone might send an "urgent" wire transfer request to a teammate while posing as you.
- They use your public success stories to make the request feel authentic and high-priority.

**PHISHING ATTACK**
Because your Medium and LinkedIn profiles confirm your tech stack, hackers could send you a targeted virus disguised as a tool.
- They send you a fake developer tool or "beta version" of a popular library you use.
- One click gives them full access to your Stanford-linked research or company files.""",
)


ALEX_RIVERA = Persona(
    name="Alex Rivera",
    keywords=("alex", "rivera", "crypto", "bitcoin", "alexrivera"),
    template=ScanResult(
        query="alexrivera_crypto",
        query_type=QueryType.USERNAME,
        breaches=[
            BreachRecord(
                name="Ledger",
                domain="ledger.com",
                breach_date="2020-07-14",
                data_classes=["Email addresses", "Names", "Phone numbers", "Physical addresses"],
                description="272,000 Ledger customers had physical addresses leaked.",
                pwn_count=272000,
            ),
            BreachRecord(
                name="BitcoinTalk",
                domain="bitcointalk.org",
                breach_date="2015-05-22",
                data_classes=["Email addresses", "Passwords", "Usernames"],
                description="BitcoinTalk forum breach exposed 500k accounts.",
                pwn_count=500000,
            ),
        ],
        profiles=[
            ProfileRecord(platform="Twitter/X", url="https://twitter.com/alexrivera_btc",
                          title="@alexrivera_btc", snippet="Bitcoin maximalist 🟠 | DeFi degen | NFA"),
            ProfileRecord(platform="Reddit", url="https://reddit.com/user/alexrivera_crypto",
                          title="u/alexrivera_crypto", snippet="Active in r/cryptocurrency, r/bitcoin"),
            ProfileRecord(platform="Discord", url="#",
                          title="alexrivera#1337", snippet="Server: CryptoTraders VIP"),
        ],
        exposed_data_types=["Email addresses", "Names", "Phone numbers", "Physical addresses", "Passwords"],
        risk_score=95,
        risk_breakdown=RiskBreakdown(
            breach_exposure=55,
            social_media_visibility=15,
            contact_info_leakage=15,
            location_data=10,
            passwords_exposed=True,
        ),
        timestamp=TEMPLATE_TIMESTAMP,
        personal_info=PersonalInfo(
            location="Miami, FL",
            employer="Self-Employed (Crypto Trader)",
            education="Florida International University",
            field_of_study="Finance, B.A.",
            phone="+1 (305) ***-**77",
            address="****** NW 2nd Ave, Miami, FL 33127",
            known_aliases=["alexrivera_crypto", "alexrivera_btc", "alex_defi"],
            websites=["https://reddit.com/user/alexrivera_crypto"],
            date_of_birth="March 3, 1995",
            financial_info="High-risk crypto asset holdings detected",
            property_value="Est. Condo Value: $850k",
            vehicle_info="2023 Porsche 911",
        ),
    ),
    narrative="""**PHYSICAL SECURITY RISK**
Because your home address in Miami was revealed in the Ledger breach, hackers could target you for a real-world home invasion.
- Since you openly discuss high-value crypto, attackers know exactly where the "physical vault" is.
- This turns a digital leak into a direct, physical safety concern for you and your family.

**ACCOUNT HIJACKING**
Because your phone number and crypto handles were revealed, hackers could bypass your security to drain your wallets.
- Someone could hijack your social media to post fake "giveaways" to your 🟠 Bitcoin followers.
- They'll use your phone number to reset access on your primary crypto exchange accounts.

**FINANCIAL FRAUD**
Because your high-risk crypto holdings and $850k property value were revealed, hackers could target you with complex tax scams.
- They send you official-looking "IRS" or "SEC" notices regarding your digital assets.
- The goal is to panic you into "verifying" your wallet keys on a fake government site.""",
)


EMILY_WATSON = Persona(
    name="Emily Watson",
    keywords=("emily", "watson", "doctor", "nurse", "healthcare", "medical"),
    template=ScanResult(
        query="emily.watson.rn@hospital.org",
        query_type=QueryType.EMAIL,
        breaches=[
            BreachRecord(
                name="MyFitnessPal",
                domain="myfitnesspal.com",
                breach_date="2018-02-01",
                data_classes=["Email addresses", "Passwords", "Usernames"],
                description="144 million MyFitnessPal accounts were compromised.",
                pwn_count=143606147,
            ),
        ],
        profiles=[
            ProfileRecord(platform="LinkedIn", url="https://linkedin.com/in/emilywatsonrn",
                          title="Emily Watson, RN, BSN - ICU Nurse", snippet="Critical care nurse at Memorial Hospital"),
            ProfileRecord(platform="Facebook", url="https://facebook.com/emily.watson.rn",
                          title="Emily Watson", snippet="Lives in Portland, Oregon"),
            ProfileRecord(platform="Instagram", url="https://instagram.com/emily_watson_rn",
                          title="@emily_watson_rn", snippet="2.4k followers | Nurse life 💉"),
        ],
        exposed_data_types=["Email addresses", "Passwords", "Usernames"],
        risk_score=65,
        risk_breakdown=RiskBreakdown(
            breach_exposure=35,
            social_media_visibility=20,
            contact_info_leakage=5,
            location_data=5,
            passwords_exposed=True,
        ),
        timestamp=TEMPLATE_TIMESTAMP,
        personal_info=PersonalInfo(
            location="Portland, OR",
            employer="Memorial Hospital",
            education="Oregon Health & Science University",
            field_of_study="Nursing, BSN",
            phone="+1 (503) ***-**91",
            known_aliases=["emily.watson.rn", "emily_watson_rn"],
            websites=["https://instagram.com/emily_watson_rn"],
            date_of_birth="February 14, 1992",
            family_members=["Thomas Watson (Father)", "Martha Watson (Mother)"],
            financial_info="Avg Household Income for Area: $95k",
            recent_travel=["Oahu, Hawaii (Jan 2024)", "Vancouver, BC (Aug 2023)"],
        ),
    ),
    narrative="""**CREDENTIAL STUFFING**
Because a password was revealed in the MyFitnessPal leak, hackers could break into your Memorial Hospital systems.
- Attackers try your leaked credentials on medical portals and patient databases.
- If successful, they could gain access to protected health information and your employee portal.

**SOCIAL ENGINEERING**
Because your role as an ICU nurse at Memorial Hospital was revealed, hackers could trick you into sharing hospital keys.
- Someone might pose as Hospital IT calling about an "urgent security patch" for your nurses' station.
- They'll use your current department and supervisor's name to make the scam feel terrifyingly real.

**IDENTITY THEFT**
Because your family member details and Portland location were revealed, hackers could answer your personal security questions.
- Scammers use your father's or mother's name to reset passwords on your utility or bank accounts.
- This allows them to take full control of your life without ever knowing your actual password.""",
)


DEMO_USER = Persona(
    name="Demo User",
    keywords=(),
    template=ScanResult(
        query="demo_user@email.com",
        query_type=QueryType.EMAIL,
        breaches=[
            BreachRecord(
                name="Collection #1",
                domain="various",
                breach_date="2019-01-17",
                data_classes=["Email addresses", "Passwords"],
                description="Collection #1 contained 773 million leaked credentials from various sources.",
                pwn_count=772904991,
            ),
            BreachRecord(
                name="Facebook",
                domain="facebook.com",
                breach_date="2021-04-03",
                data_classes=["Email addresses", "Names", "Phone numbers", "Geographic locations"],
                description="533 million Facebook users had their data scraped and leaked.",
                pwn_count=533000000,
            ),
            BreachRecord(
                name="Spotify",
                domain="spotify.com",
                breach_date="2020-11-23",
                data_classes=["Email addresses", "Names", "Passwords"],
                description="300k Spotify accounts were exposed through credential stuffing.",
                pwn_count=300000,
            ),
        ],
        profiles=[
            ProfileRecord(platform="LinkedIn", url="https://linkedin.com/in/demo",
                          title="Demo User - Professional", snippet="Example professional profile"),
            ProfileRecord(platform="Twitter/X", url="https://twitter.com/demouser",
                          title="@demouser", snippet="Just a demo account for testing"),
            ProfileRecord(platform="Facebook", url="https://facebook.com/demo.user",
                          title="Demo User", snippet="Example Facebook profile"),
            ProfileRecord(platform="Instagram", url="https://instagram.com/demouser",
                          title="@demouser", snippet="1k followers | Demo account"),
        ],
        exposed_data_types=["Email addresses", "Names", "Phone numbers", "Passwords", "Geographic locations"],
        risk_score=82,
        risk_breakdown=RiskBreakdown(
            breach_exposure=45,
            social_media_visibility=22,
            contact_info_leakage=10,
            location_data=5,
            passwords_exposed=True,
        ),
        timestamp=TEMPLATE_TIMESTAMP,
        personal_info=PersonalInfo(
            location="Austin, TX",
            employer="Unknown",
            education="University of Texas at Austin",
            field_of_study="Information Technology",
            phone="+1 (512) ***-**03",
            known_aliases=["demouser", "demo_user"],
            websites=["https://facebook.com/demo.user"],
            date_of_birth="January 1, 1990",
        ),
    ),
    narrative="""**CREDENTIAL ATTACK**
Because your credentials appeared in multiple massive leaks, hackers could gain full access to your digital life today.
- Automated bots try your common email/password combos on every major bank and social network.
- Each reused password is a direct open door into your private and financial history.

**IDENTITY IMPERSONATION**
Because your phone number and Austin location were revealed, hackers could pose as you to hijack your services.
- They use these details to pass the "verify who you are" checks with your phone company or ISP.
- This can lead to unauthorized changes to your accounts or even service cancellations in your name.

**SOCIAL ENGINEERING**
Because your public handles and location were revealed, hackers could craft a fake but personal message to steal your data.
- They pose as local support or authorities to trick you into "validating" your sensitive information.
- By using details you thought were private, they make the request seem official and unavoidable.""",
)


# Order matters: first match wins. The default goes last.
PERSONAS: tuple[Persona, ...] = (JOHN_DOE, SARAH_CHEN, ALEX_RIVERA, EMILY_WATSON, DEMO_USER)
DEFAULT_PERSONA = PERSONAS[-1]


def normalize_query(query: str) -> str:
    return query.strip().lower()


def match_persona(query: str, personas: tuple[Persona, ...] = PERSONAS) -> Persona:
    """Pick the first persona whose keywords occur in the query. Always returns one."""
    normalized = normalize_query(query)
    for persona in personas:
        if persona.keywords and persona.matches(normalized):
            return persona
    return personas[-1]


def select_persona(query: str) -> tuple[ScanResult, str]:
    """
    Build a scan result from the matching persona.

    Template data is copied as-is; only `query` (the caller's string) and
    `timestamp` (now) are request-specific.
    """
    persona = match_persona(query)
    result = persona.template.model_copy(
        deep=True,
        update={"query": query, "timestamp": datetime.now(timezone.utc)},
    )
    return result, persona.narrative
