"""The fixed example document.

The content lives in module constants so tests can reuse the same strings;
`print_document` is the only place that knows the print order.
"""

from __future__ import annotations

import logging

from rich.console import Console

from core.config import AppSettings
from core.text_decorator import (
    print_bullet_point,
    print_numbered_point,
    print_paragraph,
    print_rule,
    print_section,
    print_subsection,
    print_title,
)

logger = logging.getLogger(__name__)

TITLE = "Document Structure Example"

KEY_FEATURES = (
    "Clean paragraph separation with proper spacing",
    "Strategic use of bullet points for lists",
    "Clear hierarchy with headings and subheadings",
    "Professional formatting throughout",
)

STRUCTURE_PARAGRAPHS = (
    (
        "The content is organized into logical sections, each with its own",
        "heading. This makes it easy to scan and find specific information.",
    ),
    (
        "Each paragraph stands alone, separated by whitespace for better",
        "readability.",
    ),
)

NUMBERED_POINTS = (
    "Numbered lists when sequence matters",
    "Each point is clear and concise",
    "Proper indentation maintained",
)

UNORDERED_POINTS = (
    "Bullet points for unordered lists",
    "Short, focused points",
    "Easy to scan quickly",
)

CONCLUSION = (
    "The conclusion wraps up the main points succinctly. It maintains",
    "the same clean formatting established throughout the document.",
)


def print_document(console: Console, settings: AppSettings | None = None) -> None:
    """Prints the whole example document to `console`."""

    settings = settings or AppSettings()
    bullet = settings.bullet
    logger.debug("Printing document %r (bullet=%r, rule_width=%d)", TITLE, bullet, settings.rule_width)

    print_title(console, TITLE, rule_width=settings.rule_width)

    print_section(console, "Key Features")
    for point in KEY_FEATURES:
        print_bullet_point(console, point, bullet=bullet)

    print_section(console, "Section 1: Structure")
    for paragraph in STRUCTURE_PARAGRAPHS:
        print_paragraph(console, *paragraph)

    print_section(console, "Section 2: Formatting Examples")

    print_subsection(console, "Subsection A")
    for num, point in enumerate(NUMBERED_POINTS, start=1):
        print_numbered_point(console, num, point)

    print_subsection(console, "Subsection B")
    for point in UNORDERED_POINTS:
        print_bullet_point(console, point, bullet=bullet)

    print_section(console, "Conclusion")
    print_paragraph(console, *CONCLUSION)

    print_paragraph(console)
    print_rule(console, "-", settings.rule_width)
