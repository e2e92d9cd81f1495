# tailor/loader.py
"""
Build resume and ideal-profile models from plain data (dicts, JSON, YAML).

Missing optional collections become empty lists and null values count as
missing (null bullets are dropped). Structurally invalid input
(unknown section names, keyword categories or importance tiers, a keyword map
without one of its categories) raises ValueError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from tailor.models import (
    CandidateProfile, ResumeProfile, ResumeSection, PersonalInfo,
    ExperienceEntry, EducationEntry, SkillEntry, LanguageEntry,
    CertificationEntry, ProjectEntry
)
from tailor.ats.models import (
    KeywordCategory, Importance, KeywordEntry, KeywordMap,
    IdealStructure, IdealProfile
)

logger = logging.getLogger(__name__)

# Keys as stored by the web application, mapped to model field names
_KEY_ALIASES = {
    'fullName': 'full_name',
    'linkedIn': 'linkedin',
    'startDate': 'start_date',
    'endDate': 'end_date',
}


def _get(data: Dict[str, Any], key: str, default: Any = "") -> Any:
    """Read a key, accepting the camelCase alias and treating None as missing"""
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping, got {type(data).__name__}: {data!r}")
    value = data.get(key)
    if value is None:
        for alias, name in _KEY_ALIASES.items():
            if name == key and data.get(alias) is not None:
                value = data[alias]
                break
    return default if value is None else value


def _list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _int(data: Dict[str, Any], key: str, default: int) -> int:
    """Read an integer field; None counts as missing"""
    value = data.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")


def _strings(data: Dict[str, Any], key: str) -> List[str]:
    """A list of text lines with null entries dropped"""
    lines = []
    for value in _list(data, key):
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"'{key}' entries must be strings, got {value!r}")
        lines.append(value)
    return lines


def _sections(names: List[str]) -> List[ResumeSection]:
    return [ResumeSection.parse(name) for name in names]


def _personal_info(data: Optional[Dict[str, Any]]) -> PersonalInfo:
    data = data or {}
    return PersonalInfo(
        full_name=_get(data, 'full_name'),
        email=_get(data, 'email'),
        phone=_get(data, 'phone'),
        location=_get(data, 'location'),
        linkedin=_get(data, 'linkedin'),
        portfolio=_get(data, 'portfolio'),
        summary=_get(data, 'summary'),
    )


def _experience(data: Dict[str, Any]) -> ExperienceEntry:
    return ExperienceEntry(
        company=_get(data, 'company'),
        title=_get(data, 'title'),
        start_date=_get(data, 'start_date'),
        end_date=_get(data, 'end_date'),
        current=bool(_get(data, 'current', False)),
        location=_get(data, 'location'),
        bullets=_strings(data, 'bullets'),
    )


def _education(data: Dict[str, Any]) -> EducationEntry:
    return EducationEntry(
        institution=_get(data, 'institution'),
        degree=_get(data, 'degree'),
        field=_get(data, 'field'),
        start_date=_get(data, 'start_date'),
        end_date=_get(data, 'end_date'),
        gpa=_get(data, 'gpa'),
    )


def _skill(data: Union[str, Dict[str, Any]]) -> SkillEntry:
    if isinstance(data, str):
        return SkillEntry(name=data)
    return SkillEntry(name=_get(data, 'name'))


def _language(data: Dict[str, Any]) -> LanguageEntry:
    return LanguageEntry(
        language=_get(data, 'language'),
        proficiency=_get(data, 'proficiency'),
    )


def _certification(data: Union[str, Dict[str, Any]]) -> CertificationEntry:
    if isinstance(data, str):
        return CertificationEntry(name=data)
    return CertificationEntry(
        name=_get(data, 'name'),
        issuer=_get(data, 'issuer'),
        date=_get(data, 'date'),
        url=_get(data, 'url'),
    )


def _project(data: Dict[str, Any]) -> ProjectEntry:
    return ProjectEntry(
        name=_get(data, 'name'),
        description=_get(data, 'description'),
        url=_get(data, 'url'),
        bullets=_strings(data, 'bullets'),
    )


def _content(data: Dict[str, Any]) -> Dict[str, Any]:
    return dict(
        personal_info=_personal_info(data.get('personal_info') or data.get('personalInfo')),
        experience=[_experience(e) for e in _list(data, 'experience')],
        education=[_education(e) for e in _list(data, 'education')],
        skills=[_skill(s) for s in _list(data, 'skills')],
        languages=[_language(l) for l in _list(data, 'languages')],
        certifications=[_certification(c) for c in _list(data, 'certifications')],
        projects=[_project(p) for p in _list(data, 'projects')],
    )


def candidate_from_dict(data: Dict[str, Any]) -> CandidateProfile:
    """Build a master (full) profile"""
    return CandidateProfile(**_content(data))


def resume_from_dict(data: Dict[str, Any]) -> ResumeProfile:
    """
    Build a resume variant.

    Without 'included_sections' every canonical section is included; without
    'section_order' the included sections are shown in the order given.
    """
    if data.get('included_sections') is None:
        included = ResumeSection.all()
    else:
        included = _sections(_list(data, 'included_sections'))

    if data.get('section_order') is None:
        order = list(included)
    else:
        order = _sections(_list(data, 'section_order'))

    return ResumeProfile(
        included_sections=included,
        section_order=order,
        **_content(data)
    )


def _importance(value: str) -> Importance:
    try:
        return Importance(value)
    except ValueError:
        valid = ', '.join(i.value for i in Importance)
        raise ValueError(f"Unknown keyword importance '{value}' (expected one of: {valid})")


def keyword_map_from_dict(data: Dict[str, Any]) -> KeywordMap:
    """Build the keyword map; all five categories must be present"""
    if not isinstance(data, dict):
        raise ValueError("keyword_map must be a mapping of category to keyword list")

    known = {c.value for c in KeywordCategory}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown keyword categories: {', '.join(unknown)}")

    missing = [c.value for c in KeywordCategory if c.value not in data]
    if missing:
        raise ValueError(f"keyword_map is missing categories: {', '.join(missing)}")

    groups = {}
    for category in KeywordCategory:
        entries = []
        for entry in _list(data, category.value):
            if not isinstance(entry, dict) or not isinstance(entry.get('keyword'), str):
                raise ValueError(f"Keyword entry in '{category.value}' has no 'keyword': {entry!r}")
            entries.append(KeywordEntry(
                keyword=entry['keyword'],
                importance=_importance(entry.get('importance') or 'important'),
                frequency=_int(entry, 'frequency', 1),
            ))
        groups[category.value] = entries
    return KeywordMap(**groups)


def ideal_structure_from_dict(data: Dict[str, Any]) -> IdealStructure:
    length_range = data.get('summary_length_range') or [0, 0]
    if not isinstance(length_range, (list, tuple)) or len(length_range) != 2:
        raise ValueError("summary_length_range must be [min, max]")
    try:
        low, high = int(length_range[0]), int(length_range[1])
    except (TypeError, ValueError):
        raise ValueError(f"summary_length_range must hold two integers, got {length_range!r}")

    return IdealStructure(
        section_order=_sections(_list(data, 'section_order')),
        bullet_count_per_experience=_int(data, 'bullet_count_per_experience', 0),
        has_summary=bool(data.get('has_summary', True)),
        summary_length_range=(low, high),
        total_page_count=_int(data, 'total_page_count', 1),
    )


def ideal_profile_from_dict(data: Dict[str, Any]) -> IdealProfile:
    """Build an ideal profile as produced by the generative model"""
    if 'keyword_map' not in data:
        raise ValueError("Ideal profile has no keyword_map")

    return IdealProfile(
        keyword_map=keyword_map_from_dict(data['keyword_map']),
        ideal_measurable_results_count=_int(data, 'ideal_measurable_results_count', 0),
        ideal_structure=ideal_structure_from_dict(data.get('ideal_structure') or {}),
        summary=data.get('summary') or "",
        experience_bullets=_strings(data, 'experience_bullets'),
        skills=list(_list(data, 'skills')),
        education=list(_list(data, 'education')),
    )


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a JSON or YAML document"""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(f"Unsupported file type '{path.suffix}' (use .json, .yaml or .yml)")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f) if suffix == '.json' else yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")

    logger.debug(f"Loaded {path}")
    return data


def load_resume(path: Union[str, Path]) -> ResumeProfile:
    return resume_from_dict(load_document(path))


def load_candidate(path: Union[str, Path]) -> CandidateProfile:
    return candidate_from_dict(load_document(path))


def load_ideal_profile(path: Union[str, Path]) -> IdealProfile:
    data = load_document(path)
    # Stored analyses keep the profile under 'ideal_resume'
    if 'ideal_resume' in data:
        data = data['ideal_resume']
    return ideal_profile_from_dict(data)
