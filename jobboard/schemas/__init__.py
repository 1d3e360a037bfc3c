# __init__.py
from jobboard.schemas.application import ApplicationCreate, ApplicationRead, ApplicationStatusUpdate
from jobboard.schemas.candidate import CandidateCreate, CandidateRead
from jobboard.schemas.candidate_skill import CandidateSkillCreate, CandidateSkillRead, CandidateSkillUpdate
from jobboard.schemas.common import ErrorResponse, FieldErrorItem, PaginatedResponse, PaginationMeta
from jobboard.schemas.company import CompanyCreate, CompanyRead
from jobboard.schemas.job import JobCreate, JobRead
from jobboard.schemas.job_category import JobCategoryCreate, JobCategoryRead
from jobboard.schemas.job_skill import JobSkillCreate, JobSkillRead, JobSkillUpdate
from jobboard.schemas.recruiter import RecruiterCreate, RecruiterRead
from jobboard.schemas.resume import ResumeCreate, ResumeRead
from jobboard.schemas.skill import SkillCreate, SkillRead
from jobboard.schemas.user import UserCreate, UserRead

__all__ = [
	"ApplicationCreate",
	"ApplicationRead",
	"ApplicationStatusUpdate",
	"CandidateCreate",
	"CandidateRead",
	"CandidateSkillCreate",
	"CandidateSkillRead",
	"CandidateSkillUpdate",
	"CompanyCreate",
	"CompanyRead",
	"ErrorResponse",
	"FieldErrorItem",
	"JobCategoryCreate",
	"JobCategoryRead",
	"JobCreate",
	"JobRead",
	"JobSkillCreate",
	"JobSkillRead",
	"JobSkillUpdate",
	"PaginatedResponse",
	"PaginationMeta",
	"RecruiterCreate",
	"RecruiterRead",
	"ResumeCreate",
	"ResumeRead",
	"SkillCreate",
	"SkillRead",
	"UserCreate",
	"UserRead",
]
