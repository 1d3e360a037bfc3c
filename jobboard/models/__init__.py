# __init__.py
from jobboard.models.application import Application
from jobboard.models.candidate import Candidate
from jobboard.models.candidate_skill import CandidateSkill
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.job_category import JobCategory
from jobboard.models.job_skill import JobSkill
from jobboard.models.recruiter import Recruiter
from jobboard.models.resume import Resume
from jobboard.models.skill import Skill
from jobboard.models.user import User

__all__ = [
	"Application",
	"Candidate",
	"CandidateSkill",
	"Company",
	"Job",
	"JobCategory",
	"JobSkill",
	"Recruiter",
	"Resume",
	"Skill",
	"User",
]
