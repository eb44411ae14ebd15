from .api import (
    AnalyzeRequest,
    EnhancementRequest,
    EnhancementResponse,
)
from .resume import (
    ATSScore,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    NOT_SPECIFIED,
    PRESENT,
    ParsedResume,
    ResumeSections,
)

__all__ = [
    "ATSScore",
    "ContactInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ResumeSections",
    "ParsedResume",
    "NOT_SPECIFIED",
    "PRESENT",
    "AnalyzeRequest",
    "EnhancementRequest",
    "EnhancementResponse",
]
