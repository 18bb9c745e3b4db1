"""Skills module - OpenClaw skills and the clawhub installer."""

from .Skill import Skill
from .scan_skills import scan_skills

__all__ = ["Skill", "scan_skills"]
