"""Detect which standard resume sections have a header line."""

import re

# Canonical section -> header spellings (a header is a line of its own)
SECTION_HEADERS: dict[str, tuple[str, ...]] = {
    "summary": (
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ),
    "experience": (
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*history",
        r"positions?\s*held",
    ),
    "education": (
        r"education(?:al)?\s*(?:background|history)?",
        r"academic\s*background",
    ),
    "skills": (
        r"(?:technical|core|key)?\s*skills",
        r"(?:core\s+)?competencies",
        r"technologies",
        r"(?:technical\s+)?stack",
    ),
    "projects": (
        r"(?:key|selected|personal)?\s*projects",
        r"portfolio",
    ),
    "certifications": (
        r"(?:licen[sc]es?\s*(?:&|and)?\s*)?certific(?:ations?|ates?)",
    ),
    "achievements": (
        r"(?:key\s+)?achievements?",
        r"awards?|honors?",
    ),
}

_HEADER_RE: dict[str, re.Pattern] = {
    name: re.compile(rf"(?:{'|'.join(spellings)})\s*:?", re.IGNORECASE)
    for name, spellings in SECTION_HEADERS.items()
}


def _header_section(line: str) -> str | None:
    # Markdown headers ("## Skills") count as plain headers
    candidate = line.strip().lstrip("#").strip()
    if not candidate:
        return None
    return next(
        (name for name, pattern in _HEADER_RE.items() if pattern.fullmatch(candidate)),
        None,
    )


def detect_sections(text: str) -> list[str]:
    """Sorted names of the standard sections that have a header line in text."""
    if not text:
        return []
    return sorted({name for line in text.splitlines() if (name := _header_section(line))})
