"""Tests for measurable-result detection and scoring."""

import pytest

from tailor.models import (
    CandidateProfile, PersonalInfo, ExperienceEntry, ProjectEntry, ResumeSection
)
from tailor.ats import is_measurable, score_measurable_results


@pytest.mark.parametrize("line", [
    "Grew revenue by 35%",
    "Improved uptime to 99.9%",
    "Saved $250K in licensing",
    "Closed deals worth € 40,000",
    "Secured £1.5M in funding",
    "Served 5 clients across the region",
    "Managed 3 Team Members",
    "Expanded into 3 locations",
    "Managed a team of 12 engineers",
    "Shipped 150+ features",
    "Handled 5 to 8 escalations weekly",
    "Cut release time from 3-4 days",
    "Reduced response time 2–3 hours",
])
def test_measurable_lines(line):
    assert is_measurable(line)


@pytest.mark.parametrize("line", [
    "Worked at the company since 2019",
    "Joined in 1999 as an intern",
    "Led the platform team",
    "Wrote 3 design documents",
    "",
])
def test_lines_without_metrics(line):
    assert not is_measurable(line)


def test_year_does_not_hide_other_numbers():
    assert is_measurable("In 2021 onboarded 40 partners")


class TestScoreMeasurableResults:

    def test_two_of_four_bullets_against_target_four(self, resume):
        result = score_measurable_results(resume, 4)

        assert result.score == 50
        assert result.total_bullets == 4
        assert result.bullets_with_metrics == 2
        assert result.ideal_count == 4
        assert not result.summary_has_metric
        assert [a.has_metric for a in result.bullet_assessments] == [True, True, False, False]

    def test_assessments_carry_indices_and_text(self, resume):
        result = score_measurable_results(resume, 4)
        first = result.bullet_assessments[0]

        assert first.section == ResumeSection.EXPERIENCE
        assert first.entry_index == 0
        assert first.bullet_index == 0
        assert first.text == "Grew revenue by 35% through pricing experiments"

    def test_summary_counts_once(self):
        profile = CandidateProfile(
            personal_info=PersonalInfo(summary="Engineer with 10+ years and 40% growth"),
            experience=[ExperienceEntry(bullets=["Raised NPS by 20%"])],
        )
        result = score_measurable_results(profile, 4)

        assert result.summary_has_metric
        assert result.bullets_with_metrics == 2
        assert result.total_bullets == 1
        assert result.score == 50

    def test_project_bullets_are_assessed(self):
        profile = CandidateProfile(
            experience=[ExperienceEntry(bullets=["Cut costs by 10%"])],
            projects=[ProjectEntry(name="CLI", bullets=["Reached 500 users", "Wrote docs"])],
        )
        result = score_measurable_results(profile, 2)

        assert result.total_bullets == 3
        assert result.bullets_with_metrics == 2
        assert result.score == 100
        project_assessments = [
            a for a in result.bullet_assessments if a.section == ResumeSection.PROJECTS
        ]
        assert [(a.entry_index, a.bullet_index) for a in project_assessments] == [(0, 0), (0, 1)]

    def test_score_caps_at_100(self):
        profile = CandidateProfile(
            experience=[ExperienceEntry(bullets=["Up 10%", "Up 20%", "Up 30%"])]
        )
        assert score_measurable_results(profile, 2).score == 100

    def test_zero_target_scores_0(self, resume):
        assert score_measurable_results(resume, 0).score == 0

    def test_empty_profile(self):
        result = score_measurable_results(CandidateProfile(), 3)
        assert result.score == 0
        assert result.total_bullets == 0
        assert result.bullet_assessments == []

    def test_rounds_half_up(self):
        # 1 of 8 -> 12.5 -> 13
        profile = CandidateProfile(experience=[ExperienceEntry(bullets=["Up 10%"])])
        assert score_measurable_results(profile, 8).score == 13


@pytest.mark.parametrize("line", [
    "Grew revenue by ٣٥%",
    "Served ٥ clients",
    "Handled ١٢٠ tickets",
])
def test_only_ascii_digits_count(line):
    assert not is_measurable(line)
