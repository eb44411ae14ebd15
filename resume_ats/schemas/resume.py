from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

NOT_SPECIFIED = "Not specified"
PRESENT = "Present"


class ContactInfo(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None

    def is_empty(self) -> bool:
        return not any(self.model_dump().values())


class ExperienceEntry(BaseModel):
    position: str
    company: str
    start_date: str
    end_date: str
    description: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    degree: str
    field: str = NOT_SPECIFIED
    institution: str
    graduation_date: str = NOT_SPECIFIED
    gpa: str | None = None


class ResumeSections(BaseModel):
    contact_info: ContactInfo | None = None
    summary: str | None = None
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)


class ATSScore(BaseModel):
    keywords: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)
    readability: int = Field(ge=0, le=100)
    structure: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall(self) -> int:
        """Rounded mean of the four sub-scores; derived, never stored."""
        return round((self.keywords + self.formatting + self.readability + self.structure) / 4)


class ParsedResume(BaseModel):
    text: str
    sections: ResumeSections
    ats_score: ATSScore
