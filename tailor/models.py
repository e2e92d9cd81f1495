# tailor/models.py
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any
from enum import Enum


class ResumeSection(Enum):
    """Canonical resume sections"""
    PERSONAL_INFO = "personal_info"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    LANGUAGES = "languages"
    CERTIFICATIONS = "certifications"
    PROJECTS = "projects"

    @classmethod
    def all(cls) -> List['ResumeSection']:
        """All sections in canonical order"""
        return list(cls)

    @classmethod
    def parse(cls, name: str) -> 'ResumeSection':
        try:
            return cls(name)
        except ValueError:
            valid = ', '.join(s.value for s in cls)
            raise ValueError(f"Unknown resume section '{name}' (expected one of: {valid})")


@dataclass
class PersonalInfo:
    """Personal information and summary"""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    portfolio: str = ""
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExperienceEntry:
    """Work experience entry"""
    company: str = ""
    title: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    location: str = ""
    bullets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class EducationEntry:
    """Education entry"""
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SkillEntry:
    name: str = ""


@dataclass
class LanguageEntry:
    language: str = ""
    proficiency: str = ""


@dataclass
class CertificationEntry:
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""


@dataclass
class ProjectEntry:
    """Project entry with optional bullets"""
    name: str = ""
    description: str = ""
    url: str = ""
    bullets: List[str] = field(default_factory=list)


@dataclass
class CandidateProfile:
    """
    The candidate's complete, unfiltered resume content (master profile).

    Every collection is required; absent content is an empty list.
    """
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[SkillEntry] = field(default_factory=list)
    languages: List[LanguageEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)

    @property
    def summary(self) -> str:
        return self.personal_info.summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export"""
        return {
            'personal_info': self.personal_info.to_dict(),
            'experience': [e.to_dict() for e in self.experience],
            'education': [e.to_dict() for e in self.education],
            'skills': [asdict(s) for s in self.skills],
            'languages': [asdict(l) for l in self.languages],
            'certifications': [asdict(c) for c in self.certifications],
            'projects': [asdict(p) for p in self.projects],
        }

    def __repr__(self):
        return (
            f"<{type(self).__name__}: {self.personal_info.full_name or 'unnamed'} | "
            f"{len(self.experience)} roles>"
        )


@dataclass(repr=False)
class ResumeProfile(CandidateProfile):
    """
    A per-application resume variant: filtered content plus the sections
    shown and the order they are displayed in.
    """
    included_sections: List[ResumeSection] = field(default_factory=list)
    section_order: List[ResumeSection] = field(default_factory=list)

    def visible_order(self) -> List[ResumeSection]:
        """Display order restricted to included sections"""
        included = set(self.included_sections)
        return [s for s in self.section_order if s in included]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['included_sections'] = [s.value for s in self.included_sections]
        data['section_order'] = [s.value for s in self.section_order]
        return data
