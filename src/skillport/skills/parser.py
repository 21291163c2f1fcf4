"""
Skill parser for Skillport.

Extracts name, description, category and tags from the frontmatter block of
a SKILL.md descriptor. Matching is line oriented and lenient: descriptors are
written by hand, so the first occurrence of each known key wins, unknown keys
are ignored, and anything malformed falls back to defaults.
"""

import re
from pathlib import Path

from skillport.skills.exceptions import DescriptorParseError
from skillport.skills.models import SkillFrontmatter

FRONTMATTER_MARKER = "---"

_KEY_PATTERNS = {
    key: re.compile(rf"^{key}:\s*(.+)$")
    for key in ("name", "description", "category", "tags")
}

_QUOTES = ('"', "'")


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split a markdown document into its frontmatter block and body.

    The block must open on the very first line with ``---`` and close at the
    next line that holds only ``---``.

    Args:
        content: The full markdown content.

    Returns:
        Tuple of (frontmatter text or None, remaining content).
    """
    lines = content.splitlines()
    if not lines or lines[0].rstrip() != FRONTMATTER_MARKER:
        return None, content

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_MARKER:
            block = "\n".join(lines[1:i])
            body = "\n".join(lines[i + 1 :]).strip()
            return block, body

    # No closing delimiter
    return None, content


def strip_quotes(value: str) -> str:
    """Trim a value and remove one matching pair of surrounding quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        value = value[1:-1]
    return value


def parse_tags(value: str) -> list[str]:
    """Parse a tag list written as ``a, b`` or ``[a, "b"]``.

    Empty pieces are dropped, so ``[]`` and a blank value give no tags.
    """
    value = value.strip()
    if value.startswith("["):
        value = value[1:]
    if value.endswith("]"):
        value = value[:-1]

    tags = []
    for piece in value.split(","):
        tag = strip_quotes(piece)
        if tag:
            tags.append(tag)
    return tags


def _first_match(lines: list[str], key: str) -> str | None:
    pattern = _KEY_PATTERNS[key]
    for line in lines:
        match = pattern.match(line)
        if match:
            return match.group(1)
    return None


def parse_frontmatter(content: str) -> SkillFrontmatter:
    """Parse the frontmatter of a SKILL.md document.

    Never raises: a missing or unterminated block yields all defaults.

    Args:
        content: The SKILL.md file content.

    Returns:
        SkillFrontmatter with whatever could be recovered.
    """
    result = SkillFrontmatter()

    block, _ = split_frontmatter(content)
    if block is None:
        return result

    lines = block.split("\n")

    name = _first_match(lines, "name")
    if name is not None:
        result.name = strip_quotes(name)

    description = _first_match(lines, "description")
    if description is not None:
        result.description = strip_quotes(description)

    # Blank category keeps the default
    category = _first_match(lines, "category")
    if category is not None and strip_quotes(category):
        result.category = strip_quotes(category)

    tags = _first_match(lines, "tags")
    if tags is not None:
        result.tags = parse_tags(tags)

    return result


def read_descriptor(path: Path) -> str:
    """Read a SKILL.md file as UTF-8 text.

    Raises:
        DescriptorParseError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DescriptorParseError(f"Failed to read SKILL.md: {e}", path) from e


def parse_skill_md(path: Path) -> SkillFrontmatter:
    """Read and parse a SKILL.md file.

    Args:
        path: Path to the descriptor.

    Returns:
        Parsed frontmatter.

    Raises:
        DescriptorParseError: If the file cannot be read.
    """
    return parse_frontmatter(read_descriptor(path))
