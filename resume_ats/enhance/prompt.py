from __future__ import annotations

from resume_ats.schemas import ATSScore

_GUIDELINES = (
    "Improve keyword density and relevance for ATS systems",
    "Strengthen action verbs and quantify achievements where possible",
    "Improve formatting and structure for better readability",
    "Stay truthful and do not invent experience, employers or credentials",
    "Use industry-standard terminology",
    "Use clear section headers (PROFESSIONAL SUMMARY, EXPERIENCE, EDUCATION, SKILLS) and bullet points",
    "Keep job headers in the form 'Title | Company | Start - End'",
    "Keep complete contact information at the top",
)


def build_enhancement_prompt(
    *,
    original_text: str,
    ats_score: ATSScore,
    target_role: str | None = None,
    industry: str | None = None,
    keywords: list[str] | None = None,
) -> str:
    lines = [
        "Enhance the following resume to improve its ATS (Applicant Tracking System) compatibility.",
        "",
        "Current ATS score analysis:",
        f"- Overall: {ats_score.overall}/100",
        f"- Keywords: {ats_score.keywords}/100",
        f"- Formatting: {ats_score.formatting}/100",
        f"- Readability: {ats_score.readability}/100",
        f"- Structure: {ats_score.structure}/100",
    ]
    if ats_score.suggestions:
        lines.append(f"Areas for improvement: {'; '.join(ats_score.suggestions)}")
    lines.append("")

    if target_role:
        lines.append(f"Target role: {target_role}")
    if industry:
        lines.append(f"Target industry: {industry}")
    if keywords:
        lines.append(f"Important keywords to include: {', '.join(keywords)}")

    lines.append("")
    lines.append("Guidelines:")
    lines.extend(f"{index}. {guideline}" for index, guideline in enumerate(_GUIDELINES, start=1))
    lines.extend(["", "Original resume:", original_text, ""])
    lines.append("Focus on the lowest-scoring areas and return only the enhanced resume text.")
    return "\n".join(lines)
