"""
ATS (Applicant Tracking System) match scoring against an ideal profile
"""

from tailor.ats.models import (
    KeywordCategory, Importance, KeywordEntry, KeywordMap,
    IdealStructure, IdealProfile, KeywordMatch, KeywordMiss,
    KeywordScoreResult, BulletAssessment, MeasurableResultsResult,
    BulletCountDetail, StructureScoreResult, ScoreResult,
    ScoreBand, score_band
)
from tailor.ats.corpus import extract_corpus
from tailor.ats.matcher import (
    KeywordMatcher, stem_variants, keyword_in_text, keyword_in_full_profile
)
from tailor.ats.achievements import AchievementDetector, is_measurable
from tailor.ats.structure import StructureAnalyzer, estimate_page_count
from tailor.ats.scorer import (
    ATSScorer, score_composite, score_keywords, score_measurable_results,
    score_structure, score_all
)

__all__ = [
    'KeywordCategory',
    'Importance',
    'KeywordEntry',
    'KeywordMap',
    'IdealStructure',
    'IdealProfile',
    'KeywordMatch',
    'KeywordMiss',
    'KeywordScoreResult',
    'BulletAssessment',
    'MeasurableResultsResult',
    'BulletCountDetail',
    'StructureScoreResult',
    'ScoreResult',
    'ScoreBand',
    'score_band',
    'extract_corpus',
    'KeywordMatcher',
    'stem_variants',
    'keyword_in_text',
    'keyword_in_full_profile',
    'AchievementDetector',
    'is_measurable',
    'StructureAnalyzer',
    'estimate_page_count',
    'ATSScorer',
    'score_composite',
    'score_keywords',
    'score_measurable_results',
    'score_structure',
    'score_all',
]
