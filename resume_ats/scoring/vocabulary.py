from __future__ import annotations

ESSENTIAL_TERMS: tuple[str, ...] = (
    "experience",
    "skills",
    "education",
    "work",
    "project",
    "team",
    "management",
    "development",
    "analysis",
    "leadership",
    "communication",
)

POWER_VERBS: tuple[str, ...] = (
    "achieved",
    "improved",
    "increased",
    "led",
    "managed",
    "developed",
    "implemented",
    "created",
    "designed",
    "optimized",
    "delivered",
    "built",
    "established",
    "coordinated",
    "supervised",
    "executed",
    "enhanced",
)

PROFESSIONAL_WORDS: tuple[str, ...] = (
    "professional",
    "responsible",
    "successful",
    "effective",
    "efficient",
)

INDUSTRY_TERMS: dict[str, tuple[str, ...]] = {
    "technology": (
        "software",
        "api",
        "cloud",
        "database",
        "agile",
        "python",
        "javascript",
        "architecture",
        "deployment",
        "testing",
        "scalability",
        "devops",
    ),
    "marketing": (
        "campaign",
        "brand",
        "seo",
        "content",
        "social media",
        "analytics",
        "conversion",
        "engagement",
        "roi",
        "market research",
        "funnel",
    ),
    "finance": (
        "financial",
        "budget",
        "forecast",
        "audit",
        "compliance",
        "reporting",
        "gaap",
        "risk",
        "valuation",
        "reconciliation",
        "investment",
    ),
    "healthcare": (
        "patient",
        "clinical",
        "hipaa",
        "ehr",
        "nursing",
        "medical",
        "treatment",
        "diagnosis",
        "compliance",
        "safety",
    ),
    "sales": (
        "sales",
        "quota",
        "pipeline",
        "crm",
        "revenue",
        "prospecting",
        "negotiation",
        "client",
        "account",
        "territory",
        "closing",
    ),
}

INDUSTRY_ALIASES: dict[str, str] = {
    "tech": "technology",
    "it": "technology",
    "software": "technology",
    "engineering": "technology",
    "digital marketing": "marketing",
    "financial": "finance",
    "banking": "finance",
    "accounting": "finance",
    "health": "healthcare",
    "medical": "healthcare",
    "business development": "sales",
}

SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "keywords": (
        "Add more industry-relevant keywords and action verbs",
        "Include specific technical skills and tools",
    ),
    "formatting": (
        "Ensure complete contact information (email, phone)",
        "Include all standard sections: Experience, Education, Skills",
    ),
    "readability": (
        "Use bullet points for better readability",
        "Add quantified achievements with numbers and percentages",
    ),
    "structure": (
        "Organize content with clear section headers",
        "List experience in reverse chronological order",
    ),
}

INDUSTRY_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "technology": (
        "Name the languages, frameworks and cloud platforms you used in each role",
        "Quantify system impact such as latency, uptime or users served",
    ),
    "marketing": (
        "Highlight campaign results with metrics like ROI, conversion or engagement",
        "List marketing platforms and analytics tools you have used",
    ),
    "finance": (
        "Reference regulatory and reporting standards you have worked with (e.g. GAAP)",
        "Quantify budgets, forecasts or portfolio sizes you managed",
    ),
    "healthcare": (
        "Include licenses, certifications and compliance training (e.g. HIPAA)",
        "Describe patient outcomes and clinical systems such as EHR platforms",
    ),
    "sales": (
        "State quota attainment and revenue figures for each role",
        "Mention CRM tools and the sales cycle stages you owned",
    ),
}
