# tailor/ats/achievements.py
import re
import logging
from typing import List

from tailor.models import CandidateProfile, ResumeSection
from tailor.ats.models import BulletAssessment, MeasurableResultsResult
from tailor.ats.utils import round_half_up

logger = logging.getLogger(__name__)

ENTITY_NOUNS = [
    'users', 'clients', 'customers', 'employees', 'team members',
    'projects', 'campaigns', 'markets', 'products', 'locations',
]

# Any one of these makes a line a quantified result. ASCII digits and word
# boundaries only: "٣٥%" is not a metric.
METRIC_PATTERNS = [
    re.compile(r'\d+(\.\d+)?%', re.ASCII),                                   # 35%, 12.5%
    re.compile(r'[$€£]\s?[\d,]+(\.\d+)?[MmKkBb]?', re.ASCII),                # $1.2M, € 40,000
    re.compile(r'\b\d+[+]?\s*(' + '|'.join(ENTITY_NOUNS) + ')', re.ASCII | re.IGNORECASE),
    re.compile(r'\d+\s*(to|-|–)\s*\d+', re.ASCII),                           # 5 to 10, 3-4
    re.compile(r'\b(?!(?:19|20)\d{2}\b)\d{2,}[+]?\b', re.ASCII),             # 12, 300+ but not 2019
]


def is_measurable(text: str) -> bool:
    """Does a line contain a quantified achievement?"""
    return any(pattern.search(text) for pattern in METRIC_PATTERNS)


class AchievementDetector:
    """
    Count quantified achievements across a resume
    """

    def score(
        self,
        resume: CandidateProfile,
        ideal_count: int
    ) -> MeasurableResultsResult:
        """
        Score measurable results against the ideal profile's target count

        Experience and project bullets are checked one by one; the summary
        counts once if it carries a metric.
        """
        assessments: List[BulletAssessment] = []

        for exp_idx, exp in enumerate(resume.experience):
            assessments.extend(
                self._assess(ResumeSection.EXPERIENCE, exp_idx, exp.bullets)
            )
        for proj_idx, project in enumerate(resume.projects):
            assessments.extend(
                self._assess(ResumeSection.PROJECTS, proj_idx, project.bullets)
            )

        bullets_with_metrics = sum(1 for a in assessments if a.has_metric)
        summary_has_metric = bool(resume.summary) and is_measurable(resume.summary)
        if summary_has_metric:
            bullets_with_metrics += 1

        score = (
            min(100, round_half_up(bullets_with_metrics / ideal_count * 100))
            if ideal_count > 0 else 0
        )

        logger.debug(
            f"Measurable results: {bullets_with_metrics} flagged of "
            f"{len(assessments)} bullets (target {ideal_count}), score {score}"
        )
        return MeasurableResultsResult(
            score=score,
            total_bullets=len(assessments),
            bullets_with_metrics=bullets_with_metrics,
            ideal_count=ideal_count,
            bullet_assessments=assessments,
            summary_has_metric=summary_has_metric,
        )

    def _assess(
        self,
        section: ResumeSection,
        entry_index: int,
        bullets: List[str]
    ) -> List[BulletAssessment]:
        return [
            BulletAssessment(
                section=section,
                entry_index=entry_index,
                bullet_index=bullet_idx,
                has_metric=is_measurable(text),
                text=text,
            )
            for bullet_idx, text in enumerate(bullets)
        ]
