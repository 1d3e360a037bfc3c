"""Resource registry: one configuration per entity, no per-entity code."""

from __future__ import annotations

from types import MappingProxyType

from jobboard.models import (
    Application,
    Candidate,
    CandidateSkill,
    Company,
    Job,
    JobCategory,
    JobSkill,
    Recruiter,
    Resume,
    Skill,
    User,
)
from jobboard.schemas import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
    CandidateCreate,
    CandidateRead,
    CandidateSkillCreate,
    CandidateSkillRead,
    CandidateSkillUpdate,
    CompanyCreate,
    CompanyRead,
    JobCategoryCreate,
    JobCategoryRead,
    JobCreate,
    JobRead,
    JobSkillCreate,
    JobSkillRead,
    JobSkillUpdate,
    RecruiterCreate,
    RecruiterRead,
    ResumeCreate,
    ResumeRead,
    SkillCreate,
    SkillRead,
    UserCreate,
    UserRead,
)
from jobboard.schemas.job import check_salary_range
from jobboard.services.query_builder import FilterSpec
from jobboard.services.resource import DeleteGuard, FieldUpdate, NestedListing, Reference, Resource
from jobboard.services.sorting import SortPolicy


_sub = FilterSpec.substring
_id = FilterSpec.identifier


USERS = Resource(
    name="users",
    label="user",
    model=User,
    create_schema=UserCreate,
    read_schema=UserRead,
    filters={"first_name": _sub("first_name"), "last_name": _sub("last_name"), "email": _sub("email")},
    sort=SortPolicy(("first_name", "last_name", "email", "verified", "active", "created_time")),
    secret_fields=("password",),
)

COMPANIES = Resource(
    name="companies",
    label="company",
    model=Company,
    create_schema=CompanyCreate,
    read_schema=CompanyRead,
    filters={
        "name": _sub("name"),
        "location": FilterSpec.any_substring("country", "city", "postal_code"),
        "country": _sub("country"),
        "city": _sub("city"),
        "postal_code": _sub("postal_code"),
    },
    sort=SortPolicy(("name", "country", "city", "postal_code", "created_time")),
)

RECRUITERS = Resource(
    name="recruiters",
    label="recruiter",
    model=Recruiter,
    create_schema=RecruiterCreate,
    read_schema=RecruiterRead,
    filters={
        "first_name": _sub("first_name"),
        "last_name": _sub("last_name"),
        "email": _sub("email"),
        "company_id": _id("company_id"),
    },
    sort=SortPolicy(("first_name", "last_name", "email", "company_id", "created_time")),
    references=(Reference("company_id", "companies", "company", optional=True),),
    secret_fields=("password",),
)

CANDIDATES = Resource(
    name="candidates",
    label="candidate",
    model=Candidate,
    create_schema=CandidateCreate,
    read_schema=CandidateRead,
    filters={
        "first_name": _sub("first_name"),
        "last_name": _sub("last_name"),
        "email": _sub("email"),
        "location": _sub("location"),
    },
    sort=SortPolicy(("first_name", "last_name", "email", "location", "created_time")),
    secret_fields=("password",),
)

JOB_CATEGORIES = Resource(
    name="jobcategories",
    label="job category",
    model=JobCategory,
    create_schema=JobCategoryCreate,
    read_schema=JobCategoryRead,
    filters={"name": _sub("name"), "description": _sub("description")},
    sort=SortPolicy(("name", "description", "created_time")),
    delete_guards=(DeleteGuard("jobs", "category_id"),),
)

JOBS = Resource(
    name="jobs",
    label="job",
    model=Job,
    create_schema=JobCreate,
    read_schema=JobRead,
    filters={
        "title": _sub("title"),
        "description": _sub("description"),
        "location": _sub("location"),
        "job_type": _sub("job_type"),
        "status": _sub("status"),
    },
    sort=SortPolicy(("title", "description", "location", "job_type", "status", "created_time")),
    references=(
        Reference("recruiter_id", "recruiters", "recruiter"),
        Reference("company_id", "companies", "company"),
        Reference("category_id", "jobcategories", "job category"),
    ),
    nested=(NestedListing("companies", "jobs", "company_id"),),
    checks=(check_salary_range,),
)

SKILLS = Resource(
    name="skills",
    label="skill",
    model=Skill,
    create_schema=SkillCreate,
    read_schema=SkillRead,
    filters={"name": _sub("name")},
    sort=SortPolicy(("name", "created_time")),
)

CANDIDATE_SKILLS = Resource(
    name="candidateskills",
    label="candidate skill",
    model=CandidateSkill,
    create_schema=CandidateSkillCreate,
    read_schema=CandidateSkillRead,
    filters={
        "candidate_id": _id("candidate_id"),
        "skill_id": _id("skill_id"),
        "proficiency_level": _sub("proficiency_level"),
    },
    sort=SortPolicy(("candidate_id", "skill_id", "proficiency_level", "created_time")),
    references=(
        Reference("candidate_id", "candidates", "candidate"),
        Reference("skill_id", "skills", "skill"),
    ),
    update=FieldUpdate("proficiency_level", CandidateSkillUpdate),
    nested=(NestedListing("candidates", "skills", "candidate_id"),),
)

JOB_SKILLS = Resource(
    name="jobskills",
    label="job skill",
    model=JobSkill,
    create_schema=JobSkillCreate,
    read_schema=JobSkillRead,
    filters={
        "job_id": _id("job_id"),
        "skill_id": _id("skill_id"),
        "proficiency_level_required": _sub("proficiency_level_required"),
    },
    sort=SortPolicy(("job_id", "skill_id", "proficiency_level_required", "created_time")),
    references=(
        Reference("job_id", "jobs", "job"),
        Reference("skill_id", "skills", "skill"),
    ),
    update=FieldUpdate("proficiency_level_required", JobSkillUpdate),
    nested=(NestedListing("jobs", "skills", "job_id"),),
)

APPLICATIONS = Resource(
    name="applications",
    label="application",
    model=Application,
    create_schema=ApplicationCreate,
    read_schema=ApplicationRead,
    filters={"status": _sub("status"), "job_id": _id("job_id"), "candidate_id": _id("candidate_id")},
    sort=SortPolicy(("status", "job_id", "candidate_id", "applied_time"), default="applied_time"),
    created_field="applied_time",
    references=(
        Reference("job_id", "jobs", "job"),
        Reference("candidate_id", "candidates", "candidate"),
    ),
    update=FieldUpdate("status", ApplicationStatusUpdate),
    nested=(
        NestedListing("jobs", "applications", "job_id"),
        NestedListing("candidates", "applications", "candidate_id"),
    ),
)

RESUMES = Resource(
    name="resumes",
    label="resume",
    model=Resume,
    create_schema=ResumeCreate,
    read_schema=ResumeRead,
    filters={"candidate_id": _id("candidate_id"), "file_name": _sub("file_name")},
    sort=SortPolicy(("file_name", "uploaded_time"), default="uploaded_time"),
    created_field="uploaded_time",
    references=(Reference("candidate_id", "candidates", "candidate"),),
    nested=(NestedListing("candidates", "resumes", "candidate_id"),),
)


RESOURCES = MappingProxyType(
    {
        resource.name: resource
        for resource in (
            USERS,
            JOBS,
            CANDIDATES,
            RECRUITERS,
            COMPANIES,
            SKILLS,
            APPLICATIONS,
            JOB_CATEGORIES,
            CANDIDATE_SKILLS,
            JOB_SKILLS,
            RESUMES,
        )
    }
)
