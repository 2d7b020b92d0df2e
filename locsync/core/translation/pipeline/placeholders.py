"""Format specifier scanning.

Catalog strings carry printf-style specifiers (``%@``, ``%d``, ``%1$@``,
``%.2f``, ``%lld``) that must survive translation unchanged and in order.
"""

import re
from typing import List, Sequence

FORMAT_SPECIFIER_PATTERN = re.compile(
    r"(%[@dislf\d.$+\-#]*[dislf@]|%[0-9]+\$[@dislf]|%[1-9]\$[@dislf]|%\.[0-9]f)"
)


def scan(text: str) -> List[str]:
    """Return the format specifiers in ``text``, left to right."""
    if not text:
        return []
    return FORMAT_SPECIFIER_PATTERN.findall(text)


def placeholders_match(expected: Sequence[str], candidate: str) -> bool:
    """Check that ``candidate`` carries exactly the ``expected`` specifier sequence."""
    return scan(candidate) == list(expected)
