# tailor/ats/structure.py
import re
import math
import logging
from typing import List, Tuple

from tailor.models import ResumeProfile, ExperienceEntry
from tailor.ats.models import IdealStructure, StructureScoreResult, BulletCountDetail
from tailor.ats.utils import round_half_up, sequence_edit_distance, average

logger = logging.getLogger(__name__)

# Page estimate line budget
HEADER_LINES = 3
SUMMARY_WORDS_PER_LINE = 12
SKILLS_PER_LINE = 6
ENTRY_HEADING_LINES = 2     # title/company + dates
LINES_PER_PAGE = 45


def estimate_page_count(resume: ResumeProfile) -> int:
    """
    Rough page count from a fixed line budget per element.

    The per-element line counts and the 45-lines-per-page figure set the page
    length bands; changing them changes scores.
    """
    lines = HEADER_LINES

    if resume.summary:
        words = len(re.split(r'\s+', resume.summary))
        lines += math.ceil(words / SUMMARY_WORDS_PER_LINE) + 1

    for exp in resume.experience:
        lines += ENTRY_HEADING_LINES + len(exp.bullets)
    if resume.experience:
        lines += 1

    lines += ENTRY_HEADING_LINES * len(resume.education)
    if resume.education:
        lines += 1

    lines += math.ceil(len(resume.skills) / SKILLS_PER_LINE) + 1

    for project in resume.projects:
        lines += ENTRY_HEADING_LINES + len(project.bullets)
    if resume.projects:
        lines += 1

    lines += len(resume.certifications)
    lines += len(resume.languages)
    if resume.certifications:
        lines += 1
    if resume.languages:
        lines += 1

    return max(1, math.ceil(lines / LINES_PER_PAGE))


class StructureAnalyzer:
    """
    Compare a resume's sections, summary and length with the ideal structure
    """

    WEIGHTS = {
        'section_order': 0.30,
        'completeness': 0.25,
        'summary': 0.15,
        'bullet_count': 0.15,
        'page_length': 0.15,
    }

    def analyze(
        self,
        resume: ResumeProfile,
        ideal: IdealStructure
    ) -> StructureScoreResult:
        """
        Calculate the structure score (0-100) and its five sub-scores

        Args:
            resume: Resume variant with its included sections and order
            ideal: Structural targets from the ideal profile

        Returns:
            StructureScoreResult
        """
        current_order = resume.visible_order()
        ideal_order = list(ideal.section_order)

        section_order_score = self._section_order_score(current_order, ideal_order)

        completeness_score, missing_sections = self._completeness_score(resume, ideal_order)

        summary_word_count = len(resume.summary.split())
        summary_score = self._summary_score(summary_word_count, ideal.summary_length_range)

        bullet_count_score, bullet_details = self._bullet_count_score(
            resume.experience, ideal.bullet_count_per_experience
        )

        estimated_pages = estimate_page_count(resume)
        page_length_score = self._page_length_score(estimated_pages, ideal.total_page_count)

        score = round_half_up(
            section_order_score * self.WEIGHTS['section_order'] +
            completeness_score * self.WEIGHTS['completeness'] +
            summary_score * self.WEIGHTS['summary'] +
            bullet_count_score * self.WEIGHTS['bullet_count'] +
            page_length_score * self.WEIGHTS['page_length']
        )

        logger.debug(
            f"Structure: order={section_order_score} completeness={completeness_score} "
            f"summary={summary_score} bullets={bullet_count_score} "
            f"pages={page_length_score} ({estimated_pages}/{ideal.total_page_count}) -> {score}"
        )

        return StructureScoreResult(
            score=score,
            section_order_score=section_order_score,
            completeness_score=completeness_score,
            summary_score=summary_score,
            bullet_count_score=bullet_count_score,
            page_length_score=page_length_score,
            current_order=current_order,
            ideal_order=ideal_order,
            missing_sections=missing_sections,
            summary_word_count=summary_word_count,
            summary_ideal_range=tuple(ideal.summary_length_range),
            bullet_count_details=bullet_details,
            estimated_pages=estimated_pages,
            ideal_pages=ideal.total_page_count,
        )

    def _section_order_score(self, current: List, ideal: List) -> int:
        max_len = max(len(current), len(ideal))
        if max_len == 0:
            return 100
        distance = sequence_edit_distance(current, ideal)
        return round_half_up((1 - distance / max_len) * 100)

    def _completeness_score(self, resume: ResumeProfile, ideal_order: List) -> Tuple[int, List]:
        included = set(resume.included_sections)
        missing = [s for s in ideal_order if s not in included]
        if not ideal_order:
            return 100, missing
        present = len(ideal_order) - len(missing)
        return round_half_up(present / len(ideal_order) * 100), missing

    def _summary_score(self, word_count: int, length_range: Tuple[int, int]) -> int:
        min_words, max_words = length_range
        if word_count == 0:
            return 0
        elif word_count < min_words:
            return 50
        elif word_count > max_words:
            return 70
        else:
            return 100

    def _bullet_count_score(
        self,
        experiences: List[ExperienceEntry],
        ideal: int
    ) -> Tuple[int, List[BulletCountDetail]]:
        details = []
        entry_scores = []

        for exp in experiences:
            current = len(exp.bullets)
            details.append(BulletCountDetail(company=exp.company, current=current, ideal=ideal))

            if current == ideal:
                entry_scores.append(100)
            elif current < ideal:
                entry_scores.append(round_half_up(current / ideal * 100) if ideal > 0 else 100)
            else:
                excess = current - ideal
                entry_scores.append(max(70, 100 - excess * 10))

        return round_half_up(average(entry_scores, default=100)), details

    def _page_length_score(self, estimated: int, ideal: int) -> int:
        if estimated == ideal:
            return 100
        elif estimated == ideal + 1:
            return 60
        elif estimated == ideal - 1:
            return 40
        else:
            return 20
