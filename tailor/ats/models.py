# tailor/ats/models.py
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Optional, Tuple, Iterator, Any
from enum import Enum

from tailor.models import ResumeSection


class KeywordCategory(Enum):
    """Fixed keyword categories of an ideal profile"""
    HARD_SKILLS = "hard_skills"
    SOFT_SKILLS = "soft_skills"
    INDUSTRY_TERMS = "industry_terms"
    QUALIFICATIONS = "qualifications"
    ACTION_VERBS = "action_verbs"


class Importance(Enum):
    """How much a keyword matters to the job"""
    CRITICAL = "critical"
    IMPORTANT = "important"
    NICE_TO_HAVE = "nice_to_have"

    @property
    def weight(self) -> int:
        return _IMPORTANCE_WEIGHTS[self]


_IMPORTANCE_WEIGHTS = {
    Importance.CRITICAL: 3,
    Importance.IMPORTANT: 2,
    Importance.NICE_TO_HAVE: 1,
}


class ScoreBand(Enum):
    """Display band for a 0-100 score"""
    STRONG = "strong"   # 75+
    FAIR = "fair"       # 60-74
    WEAK = "weak"       # 40-59
    POOR = "poor"       # below 40


def score_band(score: int) -> ScoreBand:
    if score >= 75:
        return ScoreBand.STRONG
    elif score >= 60:
        return ScoreBand.FAIR
    elif score >= 40:
        return ScoreBand.WEAK
    else:
        return ScoreBand.POOR


@dataclass
class KeywordEntry:
    """A keyword the ideal profile expects"""
    keyword: str
    importance: Importance
    frequency: int = 1  # informational only


@dataclass
class KeywordMap:
    """Keywords grouped by the five fixed categories"""
    hard_skills: List[KeywordEntry] = field(default_factory=list)
    soft_skills: List[KeywordEntry] = field(default_factory=list)
    industry_terms: List[KeywordEntry] = field(default_factory=list)
    qualifications: List[KeywordEntry] = field(default_factory=list)
    action_verbs: List[KeywordEntry] = field(default_factory=list)

    def get(self, category: KeywordCategory) -> List[KeywordEntry]:
        return getattr(self, category.value)

    def entries(self) -> Iterator[Tuple[KeywordCategory, KeywordEntry]]:
        """Iterate (category, entry) pairs in category order"""
        for category in KeywordCategory:
            for entry in self.get(category):
                yield category, entry

    def __len__(self):
        return sum(len(self.get(c)) for c in KeywordCategory)


@dataclass
class IdealStructure:
    """Structural targets for the tailored resume"""
    section_order: List[ResumeSection] = field(default_factory=list)
    bullet_count_per_experience: int = 0
    has_summary: bool = True
    summary_length_range: Tuple[int, int] = (0, 0)
    total_page_count: int = 1


@dataclass
class IdealProfile:
    """
    Target profile for a specific job, produced by an external generative
    model. Only keyword_map, ideal_measurable_results_count and
    ideal_structure take part in scoring.
    """
    keyword_map: KeywordMap = field(default_factory=KeywordMap)
    ideal_measurable_results_count: int = 0
    ideal_structure: IdealStructure = field(default_factory=IdealStructure)
    summary: str = ""
    experience_bullets: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    education: List[Dict[str, str]] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class KeywordMatch:
    """A keyword found in the resume"""
    keyword: str
    category: KeywordCategory
    importance: Importance
    found_in: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'keyword': self.keyword,
            'category': self.category.value,
            'importance': self.importance.value,
            'found_in': list(self.found_in),
        }


@dataclass
class KeywordMiss:
    """A keyword missing from the resume"""
    keyword: str
    category: KeywordCategory
    importance: Importance
    in_master_resume: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'keyword': self.keyword,
            'category': self.category.value,
            'importance': self.importance.value,
            'in_master_resume': self.in_master_resume,
        }


@dataclass
class KeywordScoreResult:
    score: int
    matched: List[KeywordMatch] = field(default_factory=list)
    missing: List[KeywordMiss] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'matched_keywords': [m.to_dict() for m in self.matched],
            'missing_keywords': [m.to_dict() for m in self.missing],
        }


@dataclass
class BulletAssessment:
    """Whether one bullet carries a quantified result"""
    section: ResumeSection
    entry_index: int
    bullet_index: int
    has_metric: bool
    text: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['section'] = self.section.value
        return data


@dataclass
class MeasurableResultsResult:
    score: int
    total_bullets: int
    bullets_with_metrics: int
    ideal_count: int
    bullet_assessments: List[BulletAssessment] = field(default_factory=list)
    summary_has_metric: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'total_bullets': self.total_bullets,
            'bullets_with_metrics': self.bullets_with_metrics,
            'ideal_count': self.ideal_count,
            'bullet_assessments': [b.to_dict() for b in self.bullet_assessments],
            'summary_has_metric': self.summary_has_metric,
        }


@dataclass
class BulletCountDetail:
    company: str
    current: int
    ideal: int


@dataclass
class StructureScoreResult:
    """Structure score with its five sub-scores"""
    score: int
    section_order_score: int
    completeness_score: int
    summary_score: int
    bullet_count_score: int
    page_length_score: int
    current_order: List[ResumeSection] = field(default_factory=list)
    ideal_order: List[ResumeSection] = field(default_factory=list)
    missing_sections: List[ResumeSection] = field(default_factory=list)
    summary_word_count: int = 0
    summary_ideal_range: Tuple[int, int] = (0, 0)
    bullet_count_details: List[BulletCountDetail] = field(default_factory=list)
    estimated_pages: int = 1
    ideal_pages: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'section_order_score': self.section_order_score,
            'current_order': [s.value for s in self.current_order],
            'ideal_order': [s.value for s in self.ideal_order],
            'completeness_score': self.completeness_score,
            'missing_sections': [s.value for s in self.missing_sections],
            'summary_score': self.summary_score,
            'summary_word_count': self.summary_word_count,
            'summary_ideal_range': list(self.summary_ideal_range),
            'bullet_count_score': self.bullet_count_score,
            'bullet_count_details': [asdict(d) for d in self.bullet_count_details],
            'page_length_score': self.page_length_score,
            'estimated_pages': self.estimated_pages,
            'ideal_pages': self.ideal_pages,
        }


@dataclass
class ScoreResult:
    """Complete ATS scoring result"""
    keyword_score: int
    measurable_results_score: int
    structure_score: int
    composite: int
    max_achievable: Optional[int]

    # Detailed analysis, for display
    keyword: KeywordScoreResult
    measurable_results: MeasurableResultsResult
    structure: StructureScoreResult

    is_estimate: bool = True

    @property
    def band(self) -> ScoreBand:
        return score_band(self.composite)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'keyword_score': self.keyword_score,
            'measurable_results_score': self.measurable_results_score,
            'structure_score': self.structure_score,
            'composite': self.composite,
            'max_achievable': self.max_achievable,
            'band': self.band.value,
            'is_estimate': self.is_estimate,
            'detailed_scores': {
                'keyword_usage': self.keyword.to_dict(),
                'measurable_results': self.measurable_results.to_dict(),
                'structure': self.structure.to_dict(),
            },
        }
