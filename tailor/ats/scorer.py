# tailor/ats/scorer.py
import logging
from typing import Optional

from tailor.models import CandidateProfile, ResumeProfile, ResumeSection
from tailor.ats.models import (
    IdealProfile, IdealStructure, KeywordMap, KeywordScoreResult,
    MeasurableResultsResult, StructureScoreResult, ScoreResult
)
from tailor.ats.matcher import KeywordMatcher
from tailor.ats.achievements import AchievementDetector
from tailor.ats.structure import StructureAnalyzer
from tailor.ats.utils import round_half_up

logger = logging.getLogger(__name__)

# Weight distribution for the composite score
WEIGHTS = {
    'keyword': 0.4,
    'measurable_results': 0.4,
    'structure': 0.2,
}

# Structure score assumed for the best resume the master profile allows
OPTIMAL_STRUCTURE_SCORE = 100


def score_composite(keyword: int, measurable_results: int, structure: int) -> int:
    """Combine the three sub-scores into the composite ATS score"""
    return round_half_up(
        keyword * WEIGHTS['keyword'] +
        measurable_results * WEIGHTS['measurable_results'] +
        structure * WEIGHTS['structure']
    )


class ATSScorer:
    """
    Estimate how well a resume matches an ideal profile, without an AI call
    """

    def __init__(self):
        self.keyword_matcher = KeywordMatcher()
        self.achievement_detector = AchievementDetector()
        self.structure_analyzer = StructureAnalyzer()

    def score_all(
        self,
        resume: ResumeProfile,
        ideal: IdealProfile,
        full_profile: Optional[CandidateProfile] = None
    ) -> ScoreResult:
        """
        Score a resume against an ideal profile

        Args:
            resume: Resume variant being scored
            ideal: Ideal profile generated for the job
            full_profile: Candidate's complete master profile. When given, the
                max achievable score is computed and missing keywords are
                flagged if the master profile has them.

        Returns:
            ScoreResult with composite, sub-scores and breakdowns
        """
        keyword_result = self.keyword_matcher.match_keywords(
            resume, ideal.keyword_map, full_profile
        )
        measurable_result = self.achievement_detector.score(
            resume, ideal.ideal_measurable_results_count
        )
        structure_result = self.structure_analyzer.analyze(
            resume, ideal.ideal_structure
        )

        composite = score_composite(
            keyword_result.score,
            measurable_result.score,
            structure_result.score
        )

        max_achievable = None
        if full_profile is not None:
            max_achievable = self.score_max_achievable(full_profile, ideal)

        logger.info(
            f"ATS score {composite}/100 (keywords {keyword_result.score}, "
            f"measurable {measurable_result.score}, structure {structure_result.score}, "
            f"max achievable {max_achievable})"
        )

        return ScoreResult(
            keyword_score=keyword_result.score,
            measurable_results_score=measurable_result.score,
            structure_score=structure_result.score,
            composite=composite,
            max_achievable=max_achievable,
            keyword=keyword_result,
            measurable_results=measurable_result,
            structure=structure_result,
        )

    def score_max_achievable(self, full_profile: CandidateProfile, ideal: IdealProfile) -> int:
        """
        Upper-bound composite score using everything in the master profile.

        The structure score is taken as optimal rather than computed from the
        master profile.
        """
        best_resume = as_complete_resume(full_profile, ideal.ideal_structure)

        keyword_result = self.keyword_matcher.match_keywords(best_resume, ideal.keyword_map)
        measurable_result = self.achievement_detector.score(
            best_resume, ideal.ideal_measurable_results_count
        )

        return score_composite(
            keyword_result.score,
            measurable_result.score,
            OPTIMAL_STRUCTURE_SCORE
        )


def as_complete_resume(profile: CandidateProfile, ideal: IdealStructure) -> ResumeProfile:
    """A resume holding all of a profile's content, every section shown in ideal order"""
    return ResumeProfile(
        personal_info=profile.personal_info,
        experience=profile.experience,
        education=profile.education,
        skills=profile.skills,
        languages=profile.languages,
        certifications=profile.certifications,
        projects=profile.projects,
        included_sections=ResumeSection.all(),
        section_order=list(ideal.section_order),
    )


_default_scorer = ATSScorer()


def score_keywords(
    resume: CandidateProfile,
    keyword_map: KeywordMap,
    full_profile: Optional[CandidateProfile] = None
) -> KeywordScoreResult:
    return _default_scorer.keyword_matcher.match_keywords(resume, keyword_map, full_profile)


def score_measurable_results(resume: CandidateProfile, ideal_count: int) -> MeasurableResultsResult:
    return _default_scorer.achievement_detector.score(resume, ideal_count)


def score_structure(resume: ResumeProfile, ideal: IdealStructure) -> StructureScoreResult:
    return _default_scorer.structure_analyzer.analyze(resume, ideal)


def score_all(
    resume: ResumeProfile,
    ideal: IdealProfile,
    full_profile: Optional[CandidateProfile] = None
) -> ScoreResult:
    return _default_scorer.score_all(resume, ideal, full_profile)
