"""
Skill catalog for Skillport.

Scans a directory of skill bundles and builds the catalog: one record per
bundle directory plus the sorted set of categories present.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from skillport.skills.exceptions import DescriptorParseError, NotFoundError, ScanError
from skillport.skills.models import (
    DEFAULT_CATEGORY,
    SkillCatalog,
    SkillDetail,
    SkillFile,
    SkillRecord,
)
from skillport.skills.parser import parse_frontmatter, parse_skill_md, read_descriptor
from skillport.storage.paths import SKILL_DESCRIPTOR, ensure_directory, expand_user_path

logger = logging.getLogger(__name__)

# Category filter value meaning "no filter".
ALL_CATEGORIES = "all"


def is_safe_skill_id(skill_id: str) -> bool:
    """Check that a skill id names a single directory entry."""
    if not skill_id or skill_id in (".", ".."):
        return False
    return "/" not in skill_id and "\\" not in skill_id and os.sep not in skill_id


def load_skill_record(skill_dir: Path) -> SkillRecord:
    """Build the record for one bundle directory.

    A descriptor that cannot be read is logged and leaves the record at its
    directory-derived defaults.

    Args:
        skill_dir: Path to the bundle directory.

    Returns:
        The skill record.
    """
    record = SkillRecord.from_directory(skill_dir)

    descriptor = skill_dir / SKILL_DESCRIPTOR
    try:
        if descriptor.is_file():
            record.apply_frontmatter(parse_skill_md(descriptor))
    except (DescriptorParseError, OSError) as e:
        logger.warning(f"Error reading SKILL.md for {skill_dir.name}: {e}")

    return record


def scan_skills_dir(directory: Path) -> list[SkillRecord]:
    """List the skill bundles directly under a directory.

    Only directories count; files at the top level are ignored. Records come
    back in directory listing order.

    Args:
        directory: Directory to scan.

    Returns:
        List of skill records (empty if the directory does not exist).

    Raises:
        ScanError: If the directory exists but cannot be listed.
    """
    directory = expand_user_path(directory)
    if not directory.is_dir():
        return []

    records = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir():
                    records.append(load_skill_record(directory / entry.name))
    except OSError as e:
        raise ScanError(f"Cannot list skills directory: {e}", directory) from e

    logger.debug(f"Scanned {len(records)} skill(s) in {directory}")
    return records


def sort_categories(categories: Iterable[str]) -> list[str]:
    """Sort distinct categories, keeping the fallback category last.

    Args:
        categories: Category values, duplicates allowed.

    Returns:
        Sorted list of distinct categories.
    """
    return sorted(set(categories), key=lambda c: (c == DEFAULT_CATEGORY, c))


def build_catalog(root: Path) -> SkillCatalog:
    """Build the catalog of every skill under the repository root.

    The root is created if missing, so a fresh install yields an empty
    catalog.

    Args:
        root: Skills repository root.

    Returns:
        SkillCatalog with records and sorted categories.

    Raises:
        ScanError: If the root cannot be created or listed.
    """
    root = expand_user_path(root)
    try:
        ensure_directory(root)
    except OSError as e:
        raise ScanError(f"Cannot access skills repository: {e}", root) from e

    records = scan_skills_dir(root)
    categories = sort_categories(record.category for record in records)
    return SkillCatalog(records=records, categories=categories)


def get_skill_detail(root: Path, skill_id: str) -> SkillDetail:
    """Get a skill's metadata, descriptor text and top-level files.

    Args:
        root: Skills repository root.
        skill_id: Bundle directory name.

    Returns:
        SkillDetail for the bundle.

    Raises:
        NotFoundError: If no bundle with that id exists.
    """
    skill_dir = expand_user_path(root) / skill_id
    if not is_safe_skill_id(skill_id) or not skill_dir.is_dir():
        raise NotFoundError(skill_id, skill_dir)

    detail = SkillDetail(id=skill_id, name=skill_id)

    descriptor = skill_dir / SKILL_DESCRIPTOR
    if descriptor.is_file():
        try:
            content = read_descriptor(descriptor)
        except DescriptorParseError as e:
            logger.warning(f"Error reading SKILL.md for {skill_id}: {e}")
        else:
            frontmatter = parse_frontmatter(content)
            if frontmatter.name:
                detail.name = frontmatter.name
            if frontmatter.description:
                detail.description = frontmatter.description
            detail.content = content

    try:
        with os.scandir(skill_dir) as entries:
            detail.files = [SkillFile(name=e.name, is_directory=e.is_dir()) for e in entries]
    except OSError as e:
        raise ScanError(f"Cannot list skill directory: {e}", skill_dir) from e

    return detail


def filter_skills(
    records: Iterable[SkillRecord],
    query: str = "",
    category: str | None = None,
) -> list[SkillRecord]:
    """Filter records by category and free-text query.

    The query is matched case-insensitively as a substring of the name,
    description, category or any tag.

    Args:
        records: Records to filter.
        query: Search text; empty matches everything.
        category: Exact category, or None / "all" for any.

    Returns:
        Matching records in their original order.
    """
    query = query.lower().strip()
    matches = []

    for record in records:
        if category not in (None, ALL_CATEGORIES) and record.category != category:
            continue

        if query:
            fields = [
                record.name.lower(),
                record.description.lower(),
                record.category.lower(),
                *(tag.lower() for tag in record.tags),
            ]
            if not any(query in field for field in fields):
                continue

        matches.append(record)

    return matches
