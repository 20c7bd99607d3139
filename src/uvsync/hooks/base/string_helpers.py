# File: src/uvsync/hooks/base/string_helpers.py

import re
import textwrap
from collections.abc import Mapping
from typing import Final


_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def dedent(text: str) -> str:
    return textwrap.dedent(text.replace("\t", "    "))


def fill_placeholders(template: str, values_by_key: Mapping[str, object]) -> str:
    """
    Replace `{name}` placeholders whose name is a key of `values_by_key`.

    Unlike `str.format()`, braces that do not form a known placeholder are left
    alone, so shell code full of `${VAR}` and `{ ... }` blocks needs no escaping.

    Example:
        >>> fill_placeholders('echo "${HOME}" {target}', {"target": "UV"})
        'echo "${HOME}" UV'

    :param template: Text containing placeholders.
    :param values_by_key: Replacement values; each is converted with str().
    :return: The filled text.
    """

    def replace_match(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values_by_key:
            return str(values_by_key[name])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(replace_match, template)


def strip_bounding_blank_lines(text: list[str] | str) -> str:
    """Remove leading and trailing blank lines, keeping inner blank lines and indentation."""
    lines = text.splitlines() if isinstance(text, str) else list(text)
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)


# End of file: src/uvsync/hooks/base/string_helpers.py
