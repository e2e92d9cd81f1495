# tailor/ats/matcher.py
import re
import logging
from typing import List, Optional

from tailor.models import CandidateProfile
from tailor.ats.models import (
    KeywordMap, KeywordMatch, KeywordMiss, KeywordScoreResult
)
from tailor.ats.corpus import extract_corpus
from tailor.ats.utils import round_half_up

logger = logging.getLogger(__name__)

# Token boundaries when splitting resume text into words
_TOKEN_SPLIT = re.compile(r'[\s,;.!?()\[\]{}"\'/\\-]+')
_WHITESPACE = re.compile(r'\s+')


def stem_variants(word: str) -> List[str]:
    """
    Surface variants of a word from a few naive suffix rules.

    Not a linguistic stemmer; scores depend on these exact rules.
    """
    lower = word.lower()
    variants = [lower]

    if lower.endswith('ing') and len(lower) > 5:
        variants.append(lower[:-3])
        variants.append(lower[:-3] + 'e')      # managing -> manage
    if lower.endswith('ed') and len(lower) > 4:
        variants.append(lower[:-2])
        variants.append(lower[:-1])            # managed -> manage
    if lower.endswith('s') and not lower.endswith('ss') and len(lower) > 3:
        variants.append(lower[:-1])
    if lower.endswith('tion') and len(lower) > 5:
        variants.append(lower[:-4] + 't')
        variants.append(lower[:-3] + 'e')      # generation -> generate
    if lower.endswith('ment') and len(lower) > 5:
        variants.append(lower[:-4])            # management -> manage

    return list(dict.fromkeys(variants))


def keyword_in_text(keyword: str, text: str) -> bool:
    """
    Check whether a keyword is present in lowercase text.

    Single words match on any variant as a substring, or on any text token
    sharing a variant. Multi-word keywords need every word present somewhere,
    in any position.
    """
    keyword_lower = keyword.lower()
    words = _WHITESPACE.split(keyword_lower)

    if len(words) == 1:
        variants = stem_variants(keyword_lower)
        if any(v in text for v in variants):
            return True

        variant_set = set(variants)
        for token in _TOKEN_SPLIT.split(text):
            if variant_set.intersection(stem_variants(token)):
                return True
        return False

    return all(
        any(v in text for v in stem_variants(word))
        for word in words
    )


class KeywordMatcher:
    """
    Match ideal-profile keywords against resume content
    """

    def match_keywords(
        self,
        resume: CandidateProfile,
        keyword_map: KeywordMap,
        full_profile: Optional[CandidateProfile] = None
    ) -> KeywordScoreResult:
        """
        Match every keyword and compute the importance-weighted score

        Args:
            resume: Resume being scored
            keyword_map: Keywords from the ideal profile
            full_profile: Candidate's master profile; when given, each missing
                keyword is flagged if the master profile contains it

        Returns:
            KeywordScoreResult with score 0-100 and matched/missing lists
        """
        text = extract_corpus(resume)
        master_text = extract_corpus(full_profile) if full_profile is not None else None

        matched: List[KeywordMatch] = []
        missing: List[KeywordMiss] = []
        weighted_matches = 0
        weighted_total = 0

        for category, entry in keyword_map.entries():
            weight = entry.importance.weight
            weighted_total += weight

            if keyword_in_text(entry.keyword, text):
                weighted_matches += weight
                matched.append(KeywordMatch(
                    keyword=entry.keyword,
                    category=category,
                    importance=entry.importance,
                ))
            else:
                in_master = (
                    keyword_in_text(entry.keyword, master_text)
                    if master_text is not None else False
                )
                missing.append(KeywordMiss(
                    keyword=entry.keyword,
                    category=category,
                    importance=entry.importance,
                    in_master_resume=in_master,
                ))

        score = (
            round_half_up(weighted_matches / weighted_total * 100)
            if weighted_total > 0 else 0
        )

        logger.debug(
            f"Keywords: {len(matched)}/{len(matched) + len(missing)} matched, score {score}"
        )
        return KeywordScoreResult(score=score, matched=matched, missing=missing)


def keyword_in_full_profile(keyword: str, full_profile: CandidateProfile) -> bool:
    """Check whether the candidate's master profile contains a keyword"""
    return keyword_in_text(keyword, extract_corpus(full_profile))
