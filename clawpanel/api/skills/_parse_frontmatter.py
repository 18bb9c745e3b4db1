from typing import Any

import yaml


def _parse_frontmatter(content: str) -> dict[str, Any] | None:
    """Return the YAML block between the leading ``---`` lines, or None if absent.

    Both markers must be lines of their own; ``---`` inside a value does not
    close the block.

    Raises:
        yaml.YAMLError: If the block is not valid YAML
    """
    lines = content.splitlines()
    if not lines or lines[0].rstrip() != "---":
        return None
    for end, line in enumerate(lines[1:], start=1):
        if line.rstrip() == "---":
            break
    else:
        return None
    data = yaml.safe_load("\n".join(lines[1:end]))
    if not isinstance(data, dict):
        return None
    return data
