import pytest

from models.schemas.bias import BiasType
from models.schemas.pathway import LaborMarketData, PathwayKind
from services.engine.pathways import PathwayGenerator
from services.errors import InputValidationError
from services.labor_market import LaborMarketProvider
from services.pathway_builders import (
    identify_skill_gaps,
    identify_transferable_skills,
    suggested_alternative_fields,
)

MARKET = LaborMarketData(
    field="computer science",
    growth_rate=5.0,
    avg_salary_entry=50000,
    avg_salary_mid=70000,
    avg_salary_senior=90000,
    job_availability="high",
    trending_skills=["Python", "Kubernetes"],
)


@pytest.fixture
def generator(fixed_clock):
    provider = LaborMarketProvider({"computer science": MARKET})
    gen = PathwayGenerator(labor_market=provider, clock=fixed_clock)
    gen.ensure_loaded()
    return gen


def _by_kind(result):
    return {p.id: p for p in result.pathways}


class TestPathwaySelection:
    def test_always_three_core_pathways(self, generator, make_student):
        result = generator.generate(make_student(field_of_study="computer science"))
        assert [p.id for p in result.pathways] == [
            PathwayKind.DIRECT_ENTRY,
            PathwayKind.SKILL_DEVELOPMENT,
            PathwayKind.ADVANCED_EDUCATION,
        ]

    def test_entrepreneurial_needs_soft_skills(self, generator, make_student):
        result = generator.generate(make_student(soft_skills_score=75))
        assert PathwayKind.ENTREPRENEURIAL in _by_kind(result)

        result = generator.generate(make_student(soft_skills_score=69))
        assert PathwayKind.ENTREPRENEURIAL not in _by_kind(result)

    def test_alternative_field_for_slow_growth(self, generator, make_student):
        slow = MARKET.model_copy(update={"growth_rate": 1.5})
        result = generator.generate(make_student(field_of_study="computer science"), slow)

        pathways = _by_kind(result)
        assert PathwayKind.ALTERNATIVE_FIELD in pathways
        alternative = pathways[PathwayKind.ALTERNATIVE_FIELD]
        assert alternative.feasibility_score == 65
        assert alternative.expected_salary is None
        assert [f.field_name for f in alternative.suggested_fields] == [
            "data science", "cybersecurity", "product management",
        ]

    def test_growth_at_threshold_excludes_alternative(self, generator, make_student):
        market = MARKET.model_copy(update={"growth_rate": 3.0})
        result = generator.generate(make_student(), market)
        assert PathwayKind.ALTERNATIVE_FIELD not in _by_kind(result)


class TestFeasibility:
    def test_neutral_defaults(self, generator, make_student):
        pathways = _by_kind(generator.generate(make_student(field_of_study="computer science")))
        assert pathways[PathwayKind.DIRECT_ENTRY].feasibility_score == 70
        assert pathways[PathwayKind.SKILL_DEVELOPMENT].feasibility_score == 85
        assert pathways[PathwayKind.ADVANCED_EDUCATION].feasibility_score == 60

    def test_strong_profile_clamped(self, generator, make_student):
        student = make_student(
            field_of_study="computer science",
            technical_skills_score=80,
            soft_skills_score=75,
            education_score=75,
            socioeconomic_score=65,
            experience=[{"years": 1, "relevant": True}],
        )
        pathways = _by_kind(generator.generate(student))

        assert pathways[PathwayKind.DIRECT_ENTRY].feasibility_score == 100
        assert pathways[PathwayKind.ADVANCED_EDUCATION].feasibility_score == 95
        assert pathways[PathwayKind.ENTREPRENEURIAL].feasibility_score == 50
        for pathway in pathways.values():
            assert 0 <= pathway.feasibility_score <= 100

    def test_low_socioeconomic_support(self, generator, make_student):
        student = make_student(field_of_study="computer science", socioeconomic_score=30)
        pathways = _by_kind(generator.generate(student))

        direct = pathways[PathwayKind.DIRECT_ENTRY]
        assert direct.feasibility_score == 55
        assert "Seek financial support for job search period" in direct.requirements
        assert pathways[PathwayKind.SKILL_DEVELOPMENT].feasibility_score == 65
        assert pathways[PathwayKind.ADVANCED_EDUCATION].feasibility_score == 60


class TestSalaryProjections:
    def test_projections_follow_market(self, generator, make_student):
        pathways = _by_kind(generator.generate(make_student(soft_skills_score=80), MARKET))

        direct = pathways[PathwayKind.DIRECT_ENTRY].expected_salary
        assert (direct.entry, direct.year_3, direct.year_5) == (50000, 65000, 80000)

        skills = pathways[PathwayKind.SKILL_DEVELOPMENT].expected_salary
        assert (skills.entry, skills.year_3, skills.year_5) == (60000, 75000, 90000)

        advanced = pathways[PathwayKind.ADVANCED_EDUCATION].expected_salary
        assert (advanced.entry, advanced.year_3, advanced.year_5) == (70000, 90000, 117000)

        venture = pathways[PathwayKind.ENTREPRENEURIAL].expected_salary
        assert (venture.entry, venture.year_3, venture.year_5) == (20000, 50000, 100000)

    def test_builtin_default_without_market_data(self, fixed_clock, make_student):
        generator = PathwayGenerator(clock=fixed_clock)
        result = generator.generate(make_student(field_of_study="Philosophy"))
        direct = _by_kind(result)[PathwayKind.DIRECT_ENTRY]
        assert direct.expected_salary.entry == 45000

    def test_market_override_accepts_mapping(self, generator, make_student):
        result = generator.generate(make_student(), {"avg_salary_entry": 30000})
        assert _by_kind(result)[PathwayKind.DIRECT_ENTRY].expected_salary.entry == 30000


class TestBiasPass:
    def test_female_cs_student_without_entrepreneurial_pathway(self, generator, make_student):
        student = make_student(gender="female", field_of_study="Computer Science", soft_skills_score=50)
        result = generator.generate(student)

        assert result.bias_check.bias_found is True
        assert [f.type for f in result.bias_check.flags] == [BiasType.GENDER]
        assert result.bias_check.confidence == 0.8
        assert PathwayKind.ENTREPRENEURIAL not in _by_kind(result)

    def test_entrepreneurial_at_threshold_is_clean(self, generator, make_student):
        student = make_student(gender="female", field_of_study="Computer Science", soft_skills_score=75)
        result = generator.generate(student)
        assert result.bias_check.bias_found is False
        assert result.bias_check.flags == []
        assert result.bias_check.confidence == 0.95


class TestInputs:
    def test_missing_skills_treated_as_empty(self, generator):
        result = generator.generate({"id": "s-1", "skills": None, "field_of_study": "computer science"})
        skills = _by_kind(result)[PathwayKind.SKILL_DEVELOPMENT]
        # Both trending skills become gaps
        assert [g.skill_name for g in skills.skill_gaps] == ["Python", "Kubernetes"]

    def test_missing_id_rejected(self, generator):
        with pytest.raises(InputValidationError):
            generator.generate({"field_of_study": "computer science"})

    def test_invalid_market_rejected(self, generator, make_student):
        with pytest.raises(InputValidationError):
            generator.generate(make_student(), {"growth_rate": "fast"})

    def test_insights_attached(self, generator, make_student):
        result = generator.generate(make_student(field_of_study="computer science"))
        assert [i.message for i in result.labor_market_insights] == [
            "High job availability in this field",
        ]


class TestBuilderHelpers:
    def test_skill_gaps(self, make_student):
        student = make_student(skills=[
            {"name": "python", "proficiency_level": 3.5, "market_demand": "high"},
            {"name": "SQL", "proficiency_level": 2, "market_demand": "medium"},
        ])
        gaps = identify_skill_gaps(student, MARKET)

        assert [(g.skill_name, g.priority, g.current_level) for g in gaps] == [
            ("python", "high", 3),
            ("Kubernetes", "medium", 0),
        ]

    def test_transferable_skills(self, make_student):
        student = make_student(skills=[
            {"name": "Communication", "category": "soft", "proficiency_level": 2},
            {"name": "Python", "proficiency_level": 4},
            {"name": "Excel", "proficiency_level": 3},
        ])
        skills = identify_transferable_skills(student)
        assert [(s.skill_name, s.applicability) for s in skills] == [
            ("Communication", "universal"),
            ("Python", "technical"),
        ]

    def test_no_suggestions_for_unknown_field(self, make_student):
        assert suggested_alternative_fields(make_student(field_of_study="History")) == []
        assert suggested_alternative_fields(make_student()) == []
