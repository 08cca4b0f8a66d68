"""Career pathway builders.

Each builder is a pure function of (student, labor market, policy) returning
one Pathway with a fixed timeline template, a feasibility score adjusted for
profile signals, and salary projections derived from the labor-market
averages.
"""

from models.schemas.pathway import (
    LaborMarketData,
    Pathway,
    PathwayKind,
    SalaryProjection,
    SkillGap,
    SuggestedField,
    TimelinePhase,
    TrainingRecommendation,
    TransferableSkill,
)
from models.schemas.student_profile import StudentProfile
from services.policy import DEFAULT_PATHWAY_POLICY, PathwayPolicy, round_half_up

ALTERNATIVE_FIELDS: dict[str, list[str]] = {
    "computer science": ["data science", "cybersecurity", "product management"],
    "business": ["marketing", "consulting", "project management"],
    "engineering": ["technical sales", "product development", "quality assurance"],
}

TRAINING_OPTIONS = [
    "Online courses (Coursera, Udemy)",
    "Professional certification programs",
    "Industry workshops and seminars",
    "Hands-on project experience",
]


def _clamp_feasibility(score: float) -> int:
    return max(0, min(100, round_half_up(score)))


def _score(value: float | None, default: int) -> float:
    return default if value is None else value


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def identify_skill_gaps(
    student: StudentProfile,
    market: LaborMarketData,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> list[SkillGap]:
    """High-demand skills below target proficiency, then trending skills the student lacks."""
    gaps: list[SkillGap] = []
    target = policy.skill_gap_target_level

    for skill in student.skills:
        if skill.market_demand == "high" and skill.proficiency_level < target:
            gaps.append(SkillGap(
                skill_name=skill.name,
                category=skill.category,
                current_level=int(skill.proficiency_level),
                target_level=target,
                priority="high",
            ))

    known = {s.name.lower() for s in student.skills}
    for trending in market.trending_skills:
        if trending.lower() not in known:
            gaps.append(SkillGap(
                skill_name=trending,
                current_level=0,
                target_level=target,
                priority="medium",
            ))

    return gaps


def recommended_training(gaps: list[SkillGap]) -> list[TrainingRecommendation]:
    return [
        TrainingRecommendation(
            skill=gap.skill_name,
            training_options=list(TRAINING_OPTIONS),
            estimated_duration="2-4 months" if gap.priority == "high" else "1-2 months",
        )
        for gap in gaps
    ]


def identify_transferable_skills(
    student: StudentProfile,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> list[TransferableSkill]:
    return [
        TransferableSkill(
            skill_name=skill.name,
            proficiency=skill.proficiency_level,
            applicability="universal" if skill.category == "soft" else "technical",
        )
        for skill in student.skills
        if skill.category == "soft" or skill.proficiency_level >= policy.transferable_min_proficiency
    ]


def suggested_alternative_fields(
    student: StudentProfile,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> list[SuggestedField]:
    current = (student.field_of_study or "").lower()
    if not current:
        return []
    for field, alternatives in ALTERNATIVE_FIELDS.items():
        if field in current:
            return [
                SuggestedField(
                    field_name=alt,
                    similarity_score=policy.alternative_field_similarity,
                    growth_prospects="good",
                )
                for alt in alternatives
            ]
    return []


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_direct_entry(
    student: StudentProfile,
    market: LaborMarketData,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> Pathway:
    technical = _score(student.technical_skills_score, policy.default_technical_skills_score)
    education = _score(student.education_score, policy.default_education_score)
    socio = _score(student.socioeconomic_score, policy.default_socioeconomic_score)

    feasibility = policy.direct_entry_base
    requirements: list[str] = []
    if technical >= policy.direct_entry_technical_threshold:
        feasibility += policy.direct_entry_technical_bonus
    if education >= policy.direct_entry_education_threshold:
        feasibility += policy.direct_entry_education_bonus
    if student.has_experience:
        feasibility += policy.direct_entry_experience_bonus
    if socio < policy.direct_entry_low_socio_threshold:
        feasibility -= policy.direct_entry_low_socio_penalty
        requirements.append("Seek financial support for job search period")

    field = student.field_of_study or "chosen"
    return Pathway(
        id=PathwayKind.DIRECT_ENTRY,
        title="Direct Entry Career Path",
        description=f"Enter the {field} field directly after graduation",
        feasibility_score=_clamp_feasibility(feasibility),
        timeline=[
            TimelinePhase(phase="immediate", duration="0-6 months", activities=[
                "Complete current education program",
                "Build portfolio/resume",
                "Network with industry professionals",
                "Apply for entry-level positions",
            ]),
            TimelinePhase(phase="short_term", duration="6-18 months", activities=[
                "Secure entry-level position",
                "Learn on-the-job skills",
                "Build professional relationships",
                "Seek mentorship opportunities",
            ]),
            TimelinePhase(phase="medium_term", duration="1-3 years", activities=[
                "Gain specialized experience",
                "Take on additional responsibilities",
                "Pursue relevant certifications",
                "Build leadership skills",
            ]),
        ],
        requirements=requirements,
        expected_salary=SalaryProjection(
            entry=market.avg_salary_entry,
            year_3=round_half_up(market.avg_salary_entry * policy.direct_entry_salary_year_3),
            year_5=round_half_up(market.avg_salary_entry * policy.direct_entry_salary_year_5),
        ),
        pros=[
            "Immediate income generation",
            "Real-world experience",
            "Professional network building",
        ],
        cons=[
            "May start at lower salary",
            "Limited initial responsibilities",
            "Competitive entry-level market",
        ],
    )


def build_skill_development(
    student: StudentProfile,
    market: LaborMarketData,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> Pathway:
    socio = _score(student.socioeconomic_score, policy.default_socioeconomic_score)
    feasibility = policy.skill_development_base
    if socio < policy.skill_development_low_socio_threshold:
        feasibility -= policy.skill_development_low_socio_penalty

    gaps = identify_skill_gaps(student, market, policy)
    entry = market.avg_salary_entry
    return Pathway(
        id=PathwayKind.SKILL_DEVELOPMENT,
        title="Skill Enhancement Path",
        description="Focus on developing specific skills before entering the job market",
        feasibility_score=_clamp_feasibility(feasibility),
        timeline=[
            TimelinePhase(phase="skill_building", duration="3-9 months", activities=[
                "Complete targeted skill training",
                "Earn industry certifications",
                "Build project portfolio",
                "Participate in bootcamps/workshops",
            ]),
            TimelinePhase(phase="application", duration="6-12 months", activities=[
                "Apply enhanced skills in projects",
                "Seek internships or contract work",
                "Network with industry professionals",
                "Build online presence",
            ]),
        ],
        skill_gaps=gaps,
        recommended_training=recommended_training(gaps),
        expected_salary=SalaryProjection(
            entry=round_half_up(entry * policy.skill_development_salary_entry),
            year_3=round_half_up(entry * policy.skill_development_salary_year_3),
            year_5=round_half_up(entry * policy.skill_development_salary_year_5),
        ),
        pros=[
            "Higher starting salary potential",
            "Competitive advantage",
            "Specialized expertise",
        ],
        cons=[
            "Delayed income",
            "Training costs",
            "Time investment required",
        ],
    )


def build_advanced_education(
    student: StudentProfile,
    market: LaborMarketData,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> Pathway:
    education = _score(student.education_score, policy.default_education_score)
    socio = _score(student.socioeconomic_score, policy.default_socioeconomic_score)

    feasibility = policy.advanced_education_base
    if education >= policy.advanced_education_education_threshold:
        feasibility += policy.advanced_education_education_bonus
    if socio >= policy.advanced_education_socio_threshold:
        feasibility += policy.advanced_education_socio_bonus

    return Pathway(
        id=PathwayKind.ADVANCED_EDUCATION,
        title="Advanced Education Path",
        description="Pursue graduate studies or professional degrees",
        feasibility_score=_clamp_feasibility(feasibility),
        timeline=[
            TimelinePhase(phase="preparation", duration="6-12 months", activities=[
                "Research programs and requirements",
                "Prepare for entrance exams",
                "Apply for scholarships/funding",
                "Submit applications",
            ]),
            TimelinePhase(phase="education", duration="1-3 years", activities=[
                "Complete advanced degree program",
                "Engage in research/thesis work",
                "Build academic network",
                "Seek internships/assistantships",
            ]),
        ],
        expected_salary=SalaryProjection(
            entry=market.avg_salary_mid,
            year_3=market.avg_salary_senior,
            year_5=round_half_up(market.avg_salary_senior * policy.advanced_education_salary_year_5),
        ),
        pros=[
            "Higher earning potential",
            "Advanced expertise",
            "Research opportunities",
            "Academic network",
        ],
        cons=[
            "Significant time investment",
            "Educational costs",
            "Delayed earnings",
            "Competitive admission",
        ],
    )


def build_entrepreneurial(
    student: StudentProfile,
    market: LaborMarketData,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> Pathway:
    return Pathway(
        id=PathwayKind.ENTREPRENEURIAL,
        title="Entrepreneurial Path",
        description="Start your own business or venture",
        feasibility_score=_clamp_feasibility(policy.entrepreneurial_base),
        timeline=[
            TimelinePhase(phase="planning", duration="3-6 months", activities=[
                "Develop business idea",
                "Market research and validation",
                "Create business plan",
                "Seek mentorship",
            ]),
            TimelinePhase(phase="launch", duration="6-18 months", activities=[
                "Secure initial funding",
                "Build minimum viable product",
                "Launch and test market",
                "Iterate based on feedback",
            ]),
        ],
        expected_salary=SalaryProjection(
            entry=policy.entrepreneurial_salary_entry,
            year_3=policy.entrepreneurial_salary_year_3,
            year_5=policy.entrepreneurial_salary_year_5,
        ),
        pros=[
            "Unlimited earning potential",
            "Creative freedom",
            "Be your own boss",
            "Impact on society",
        ],
        cons=[
            "High risk",
            "Financial uncertainty",
            "Long hours",
            "High failure rate",
        ],
    )


def build_alternative_field(
    student: StudentProfile,
    market: LaborMarketData,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> Pathway:
    # No salary projection: the target field is not known yet
    return Pathway(
        id=PathwayKind.ALTERNATIVE_FIELD,
        title="Alternative Field Transition",
        description="Transition to a related field with better prospects",
        feasibility_score=_clamp_feasibility(policy.alternative_field_base),
        transferable_skills=identify_transferable_skills(student, policy),
        suggested_fields=suggested_alternative_fields(student, policy),
        timeline=[
            TimelinePhase(phase="exploration", duration="1-3 months", activities=[
                "Research alternative fields",
                "Identify skill transferability",
                "Network with professionals",
                "Attend industry events",
            ]),
            TimelinePhase(phase="transition", duration="6-12 months", activities=[
                "Acquire field-specific skills",
                "Build relevant portfolio",
                "Gain experience through projects",
                "Apply for transition roles",
            ]),
        ],
        pros=[
            "Better job prospects",
            "Use existing skills",
            "Career growth opportunities",
        ],
        cons=[
            "Learning curve",
            "Potential salary adjustment",
            "Network rebuilding required",
        ],
    )


BUILDERS = {
    PathwayKind.DIRECT_ENTRY: build_direct_entry,
    PathwayKind.SKILL_DEVELOPMENT: build_skill_development,
    PathwayKind.ADVANCED_EDUCATION: build_advanced_education,
    PathwayKind.ENTREPRENEURIAL: build_entrepreneurial,
    PathwayKind.ALTERNATIVE_FIELD: build_alternative_field,
}
