# dashboard/api/scoring.py

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from tailor.loader import (
    resume_from_dict, candidate_from_dict, ideal_profile_from_dict,
    keyword_map_from_dict, ideal_structure_from_dict
)
from tailor.ats.scorer import ATSScorer, score_composite
from tailor.ats.achievements import is_measurable

logger = logging.getLogger(__name__)

router = APIRouter()

scorer = ATSScorer()


class ScoreRequest(BaseModel):
    """Resume variant, ideal profile and optional master profile"""
    resume: Dict[str, Any]
    ideal_profile: Dict[str, Any]
    master_profile: Optional[Dict[str, Any]] = None


class KeywordScoreRequest(BaseModel):
    resume: Dict[str, Any]
    keyword_map: Dict[str, Any]
    master_profile: Optional[Dict[str, Any]] = None


class MeasurableScoreRequest(BaseModel):
    resume: Dict[str, Any]
    ideal_count: int = Field(ge=0)


class StructureScoreRequest(BaseModel):
    resume: Dict[str, Any]
    ideal_structure: Dict[str, Any]


class MetricCheckRequest(BaseModel):
    text: str


def _invalid(e: Exception) -> HTTPException:
    logger.warning(f"Rejected scoring input: {e}")
    return HTTPException(status_code=422, detail=str(e))


@router.post("/")
def recalculate_score(request: ScoreRequest) -> Dict:
    """Recompute all scores for a resume variant (no AI call)"""
    try:
        resume = resume_from_dict(request.resume)
        ideal = ideal_profile_from_dict(request.ideal_profile)
        master = (
            candidate_from_dict(request.master_profile)
            if request.master_profile is not None else None
        )
    except ValueError as e:
        raise _invalid(e)

    result = scorer.score_all(resume, ideal, master)
    data = result.to_dict()
    data['detailed_scores']['composite'] = result.composite
    data['detailed_scores']['max_achievable'] = (
        result.max_achievable if result.max_achievable is not None else result.composite
    )
    return data


@router.post("/keywords")
def keyword_score(request: KeywordScoreRequest) -> Dict:
    """Keyword usage score with matched and missing keywords"""
    try:
        resume = resume_from_dict(request.resume)
        keyword_map = keyword_map_from_dict(request.keyword_map)
        master = (
            candidate_from_dict(request.master_profile)
            if request.master_profile is not None else None
        )
    except ValueError as e:
        raise _invalid(e)

    return scorer.keyword_matcher.match_keywords(resume, keyword_map, master).to_dict()


@router.post("/measurable")
def measurable_score(request: MeasurableScoreRequest) -> Dict:
    """Measurable results score with per-bullet assessments"""
    try:
        resume = resume_from_dict(request.resume)
    except ValueError as e:
        raise _invalid(e)

    return scorer.achievement_detector.score(resume, request.ideal_count).to_dict()


@router.post("/measurable/check")
def check_metric(request: MetricCheckRequest) -> Dict:
    """Does a single line carry a quantified result?"""
    return {"text": request.text, "has_metric": is_measurable(request.text)}


@router.post("/structure")
def structure_score(request: StructureScoreRequest) -> Dict:
    """Structure score with its five sub-scores"""
    try:
        resume = resume_from_dict(request.resume)
        ideal_structure = ideal_structure_from_dict(request.ideal_structure)
    except ValueError as e:
        raise _invalid(e)

    return scorer.structure_analyzer.analyze(resume, ideal_structure).to_dict()


@router.get("/composite")
def composite_score(
    keyword: int = Query(..., ge=0, le=100),
    measurable: int = Query(..., ge=0, le=100),
    structure: int = Query(..., ge=0, le=100)
) -> Dict:
    """Combine three sub-scores into the composite score"""
    return {"composite": score_composite(keyword, measurable, structure)}
