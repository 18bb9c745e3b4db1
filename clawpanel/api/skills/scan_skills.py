"""Scan the OpenClaw skills directory."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ._parse_frontmatter import _parse_frontmatter
from .Skill import Skill

logger = logging.getLogger(__name__)


def scan_skills(skills_dir: Path) -> list[Skill]:
    """Return every skill in ``skills_dir``, sorted by id.

    A skill is a subdirectory holding a SKILL.md whose front matter names it.
    Entries with missing or broken front matter are skipped. A missing
    directory yields an empty list.
    """
    if not skills_dir.is_dir():
        logger.info("Skills directory %s does not exist", skills_dir)
        return []

    skills: list[Skill] = []
    for entry in sorted(skills_dir.iterdir()):
        skill_md = entry / "SKILL.md"
        if not entry.is_dir() or not skill_md.is_file():
            continue
        try:
            frontmatter = _parse_frontmatter(skill_md.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            logger.error("Failed to parse front matter for %s: %s", entry, exc)
            continue
        if frontmatter is None:
            logger.debug("No front matter in %s", skill_md)
            continue
        try:
            skill = Skill(
                id=entry.name,
                name=frontmatter.get("name"),
                description=frontmatter.get("description"),
                path=str(entry.resolve()),
            )
        except ValidationError as exc:
            logger.error("Invalid front matter for %s: %s", entry, exc.errors()[0].get("msg"))
            continue
        skills.append(skill)

    logger.info("Found %d skill(s) in %s", len(skills), skills_dir)
    return skills
