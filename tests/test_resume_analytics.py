"""Tests for the resume analytics engine."""

from __future__ import annotations

import pytest

from app.models.resume import ResumeData
from app.services.resume_analytics import (
    AnalyticsResult,
    ReadabilityStats,
    ResumeAnalyzer,
    analyze,
    get_resume_analyzer,
    has_job_description,
)


def _with_experience(description: object, **extra: object) -> ResumeData:
    return ResumeData.model_validate(
        {
            "fullName": "Jane Doe",
            "experience": [{"role": "Engineer", "company": "Acme", "description": description}],
            **extra,
        }
    )


def _assert_bounded(result: AnalyticsResult) -> None:
    for score in (result.ats_score, result.completeness, result.job_match_score):
        assert 0 <= score <= 100
    for score in result.section_scores.values():
        assert 0 <= score <= 100
    assert result.keywords.action_verbs >= 0
    assert result.keywords.technical_skills >= 0
    assert result.keywords.soft_skills >= 0
    assert len(result.keywords.missing_keywords) <= 10
    assert result.readability.avg_word_count >= 0
    assert result.readability.bullet_points >= 0
    assert 0 <= result.readability.metric_density <= 1
    assert result.readability.quantifiable_achievements >= 0
    assert result.readability.weak_words >= 0


class TestEngineProperties:
    def test_deterministic(self, strong_resume: ResumeData) -> None:
        assert analyze(strong_resume) == analyze(strong_resume)

    def test_fresh_analyzer_matches_singleton(self, strong_resume: ResumeData) -> None:
        assert ResumeAnalyzer().analyze(strong_resume) == get_resume_analyzer().analyze(strong_resume)

    def test_does_not_mutate_input(self, strong_resume: ResumeData) -> None:
        before = strong_resume.model_dump()
        analyze(strong_resume)
        assert strong_resume.model_dump() == before

    def test_bounded(
        self,
        strong_resume: ResumeData,
        template_resume: ResumeData,
        minimal_resume: ResumeData,
    ) -> None:
        weak = _with_experience(["Responsible for helped worked on handled tried"] * 30)
        with_jd = strong_resume.model_copy(
            update={"job_description": "Python engineer with Kubernetes and Terraform skills"}
        )
        for resume in (strong_resume, template_resume, minimal_resume, weak, with_jd, ResumeData()):
            _assert_bounded(analyze(resume))

    def test_empty_input_floor(self, minimal_resume: ResumeData) -> None:
        result = analyze(minimal_resume)
        assert result.completeness <= 20
        assert result.job_match_score == 0
        assert result.readability == ReadabilityStats()
        assert result.strengths == ()

    def test_completely_empty_resume(self) -> None:
        result = analyze(ResumeData())
        assert result.section_scores.personal_info == 0
        assert result.completeness == round(100 / 8)

    def test_description_forms_are_equivalent(self) -> None:
        as_list = analyze(_with_experience(["Led team of 5", "Shipped v2"]))
        as_text = analyze(_with_experience("• Led team of 5\n• Shipped v2"))
        assert as_list.readability == as_text.readability
        assert as_list.keywords == as_text.keywords
        assert as_list == as_text

    def test_metric_bullet_increases_density(self) -> None:
        bullets = ["Led the platform migration", "Built the internal API"]
        before = analyze(_with_experience(bullets))
        after = analyze(_with_experience(bullets + ["Increased revenue by 30%"]))

        assert before.readability.metric_density == 0
        assert after.readability.metric_density > before.readability.metric_density
        assert after.readability.quantifiable_achievements > before.readability.quantifiable_achievements
        assert after.ats_score >= before.ats_score


class TestReadability:
    def test_counts_bullets_from_every_section(self, strong_resume: ResumeData) -> None:
        readability = analyze(strong_resume).readability
        # 8 experience bullets, 1 project description, 3 achievements
        assert readability.bullet_points == 12
        assert readability.quantifiable_achievements == 11

    def test_average_word_count(self) -> None:
        readability = analyze(_with_experience(["one two three", "one two three four five"])).readability
        assert readability.avg_word_count == pytest.approx(4.0)

    @pytest.mark.parametrize(
        "bullet,expected",
        [
            ("Saved $40k in licensing", 1),
            ("Cut churn by 10%", 1),
            ("Managed a budget of €2M", 1),
            ("Served 300 customers", 1),
            ("Improved onboarding", 0),
        ],
    )
    def test_metric_detection(self, bullet: str, expected: int) -> None:
        assert analyze(_with_experience([bullet])).readability.quantifiable_achievements == expected

    def test_leadership_bullets_are_counted(self) -> None:
        resume = ResumeData.model_validate(
            {"leadership": [{"role": "Chair", "company": "Club", "description": "- Ran 12 events"}]}
        )
        readability = analyze(resume).readability
        assert readability.bullet_points == 1
        assert readability.metric_density == 1

    def test_weak_phrases_counted_per_occurrence(self) -> None:
        readability = analyze(
            _with_experience(["Helped the team and helped QA", "Worked on billing"])
        ).readability
        assert readability.weak_words == 3


class TestSectionScores:
    def test_personal_info_points_per_field(self) -> None:
        resume = ResumeData(fullName="Jane", email="jane@example.com", phone="   ")
        assert analyze(resume).section_scores.personal_info == 40

    def test_personal_info_complete(self, strong_resume: ResumeData) -> None:
        assert analyze(strong_resume).section_scores.personal_info == 100

    @pytest.mark.parametrize("length,expected", [(0, 0), (100, 50), (200, 100), (300, 100)])
    def test_summary_length(self, length: int, expected: float) -> None:
        resume = ResumeData(summary="x" * length)
        assert analyze(resume).section_scores.summary == pytest.approx(expected)

    def test_experience_without_entries(self, minimal_resume: ResumeData) -> None:
        assert analyze(minimal_resume).section_scores.experience == 0

    @pytest.mark.parametrize("length,expected", [(50, 50), (150, 75), (250, 100)])
    def test_experience_description_length(self, length: int, expected: float) -> None:
        assert analyze(_with_experience("a" * length)).section_scores.experience == expected

    def test_experience_uses_average_across_entries(self) -> None:
        resume = ResumeData.model_validate(
            {
                "experience": [
                    {"role": "A", "company": "A", "description": ["a" * 50]},
                    {"role": "B", "company": "B", "description": ["b" * 250]},
                ]
            }
        )
        assert analyze(resume).section_scores.experience == 75

    def test_education_is_presence_only(self, minimal_resume: ResumeData, template_resume: ResumeData) -> None:
        assert analyze(minimal_resume).section_scores.education == 0
        assert analyze(template_resume).section_scores.education == 100

    @pytest.mark.parametrize(
        "skills,expected",
        [
            ("Python, Go, SQL, Docker, AWS, React", 100),
            ("Python, Go, SQL", 50),
            ("Python, , Go,", 100 / 3),
            ("A, B, C, D, E, F, G, H", 100),
            ("", 0),
        ],
    )
    def test_skill_count_scaling(self, skills: str, expected: float) -> None:
        assert analyze(ResumeData(skills=skills)).section_scores.skills == pytest.approx(expected)

    @pytest.mark.parametrize(
        "achievements,expected",
        [
            ("First\nSecond", 200 / 3),
            (["First", "Second", "Third"], 100),
            ("• One\n• Two\n• Three\n• Four", 100),
            ("", 0),
        ],
    )
    def test_achievement_lines(self, achievements: object, expected: float) -> None:
        resume = ResumeData(keyAchievements=achievements)
        assert analyze(resume).section_scores.achievements == pytest.approx(expected)

    def test_optional_sections(self, minimal_resume: ResumeData, strong_resume: ResumeData) -> None:
        empty = analyze(minimal_resume).section_scores
        full = analyze(strong_resume).section_scores
        assert (empty.projects, empty.certifications) == (50, 50)
        assert (full.projects, full.certifications) == (100, 100)


class TestKeywords:
    def test_lexicon_counts(self, strong_resume: ResumeData) -> None:
        keywords = analyze(strong_resume).keywords
        assert keywords.action_verbs == 15
        assert keywords.technical_skills >= 5
        assert keywords.missing_keywords == ()

    def test_dotted_js_skills_count_as_technical(self) -> None:
        keywords = analyze(ResumeData(skills="Node.js, React.js, Vue.js")).keywords
        assert keywords.technical_skills == 3

    def test_action_verb_is_not_double_counted(self) -> None:
        keywords = analyze(_with_experience(["Negotiated contracts with vendors"])).keywords
        assert keywords.action_verbs == 1
        assert keywords.soft_skills == 0


class TestJobMatch:
    @pytest.mark.parametrize("job_description", [None, "", "Python developer", "a" * 20, "   short text   "])
    def test_job_match_requires_real_description(self, strong_resume: ResumeData, job_description: str | None) -> None:
        resume = strong_resume.model_copy(update={"job_description": job_description})
        assert not has_job_description(resume)
        assert analyze(resume).job_match_score == 0

    def test_job_match_positive_with_shared_vocabulary(self) -> None:
        resume = ResumeData(
            skills="Python, Django, PostgreSQL",
            jobDescription="We are hiring a backend developer skilled in Python and Django to build APIs.",
        )
        result = analyze(resume)
        assert result.job_match_score > 0

    def test_plural_resume_term_matches_singular_description_term(self) -> None:
        resume = ResumeData(
            summary="Built payment services and billing services",
            jobDescription=(
                "We are hiring an owner for our payment service. "
                "The service is critical; the service must scale."
            ),
        )
        result = analyze(resume)
        assert "service" not in result.keywords.missing_keywords
        assert not any(item.startswith("Try to include") for item in result.improvements)
        assert result.job_match_score > 0

    def test_js_suffix_matches_across_resume_and_description(self) -> None:
        resume = ResumeData(
            skills="Node, React",
            jobDescription="Full stack developer comfortable with Node.js and React.js in production.",
        )
        assert analyze(resume).keywords.missing_keywords == ()

    def test_no_shared_vocabulary_scores_zero(self, strong_resume: ResumeData) -> None:
        resume = strong_resume.model_copy(
            update={
                "job_description": (
                    "Licensed pharmacist to dispense medications, counsel patients "
                    "and verify prescriptions accurately."
                )
            }
        )
        assert analyze(resume).job_match_score == 0

    def test_missing_keywords_follow_description_order(self) -> None:
        resume = ResumeData(
            fullName="A",
            skills="Python",
            jobDescription=(
                "Looking for an engineer with Kubernetes, Terraform and Python experience. "
                "Kubernetes is a must."
            ),
        )
        result = analyze(resume)
        assert result.keywords.missing_keywords == ("kubernetes", "terraform")
        assert "Try to include: kubernetes, terraform" in result.improvements

    def test_missing_keywords_capped_at_ten(self) -> None:
        resume = ResumeData(
            skills="Excel",
            jobDescription=(
                "Required: java, react, angular, vue, node, sql, aws, azure, docker, "
                "kubernetes, terraform, redis, graphql."
            ),
        )
        missing = analyze(resume).keywords.missing_keywords
        assert missing == (
            "java", "react", "angular", "vue", "node", "sql", "aws", "azure", "docker", "kubernetes",
        )

    def test_better_coverage_scores_higher(self) -> None:
        jd = "Backend engineer with Python, Django, PostgreSQL, Docker and Kubernetes skills."
        partial = analyze(ResumeData(skills="Python", jobDescription=jd))
        full = analyze(ResumeData(skills="Python, Django, PostgreSQL, Docker, Kubernetes", jobDescription=jd))
        assert full.job_match_score > partial.job_match_score

    def test_job_mode_changes_guidance(self, strong_resume: ResumeData) -> None:
        without = analyze(strong_resume)
        assert "Add a job description to see your job match score" in without.improvements

        with_jd = analyze(
            strong_resume.model_copy(
                update={"job_description": "Senior Python engineer to run Kubernetes on AWS with PostgreSQL."}
            )
        )
        assert "Add a job description to see your job match score" not in with_jd.improvements


class TestCompositeScores:
    def test_default_template_is_graded_strictly(self, template_resume: ResumeData) -> None:
        result = analyze(template_resume)
        assert 40 < result.ats_score < 75

    def test_strong_resume_scores_high(self, strong_resume: ResumeData, template_resume: ResumeData) -> None:
        strong = analyze(strong_resume)
        assert strong.ats_score >= 85
        assert strong.completeness == 100
        assert strong.ats_score > analyze(template_resume).ats_score

    def test_completeness_is_mean_of_sections(self, template_resume: ResumeData) -> None:
        result = analyze(template_resume)
        values = result.section_scores.values()
        assert result.completeness == round(sum(values) / len(values))


class TestRecommendations:
    def test_strong_resume_strengths(self, strong_resume: ResumeData) -> None:
        strengths = analyze(strong_resume).strengths
        assert "Strong use of metrics (numbers/%) in your bullets" in strengths
        assert "Strong action verbs throughout your experience" in strengths
        assert "Professional summary is well developed" in strengths
        assert "Resume structure is comprehensive" in strengths

    def test_weak_wording_is_flagged(self) -> None:
        result = analyze(_with_experience(["Responsible for helping the team"]))
        assert result.readability.weak_words >= 1
        assert "Strong action verbs throughout your experience" not in result.strengths
        assert any(item.startswith("Replace weak phrases") for item in result.improvements)

    def test_low_metric_density_improvement(self, template_resume: ResumeData) -> None:
        improvements = analyze(template_resume).improvements
        assert any(item.startswith("Add more quantifiable metrics") for item in improvements)
