import re
from typing import Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def render_template(template: Optional[str], values: Mapping[str, str]) -> str:
    """
    Fill ``{token}`` placeholders from ``values``. Tokens without a value
    are left untouched.
    """
    if not template:
        return ""

    def substitute(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(substitute, template)
