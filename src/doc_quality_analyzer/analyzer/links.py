from __future__ import annotations

import re
from typing import List

from ..config import Settings
from ..linkcheck import AssumeValidLinkChecker, LinkChecker
from ..models import BrokenLink, ExternalLink, InternalLink, Link, LinkValidation
from ..textutils import round_half_up

INLINE_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def extract_links(text: str) -> List[Link]:
    """Return inline markdown links in document order with 1-based lines."""
    links: List[Link] = []
    for match in INLINE_LINK_RE.finditer(text):
        line = text.count("\n", 0, match.start()) + 1
        links.append(Link(text=match.group(1), url=match.group(2), line=line))
    return links


def analyze_links(
    text: str,
    settings: Settings | None = None,
    checker: LinkChecker | None = None,
) -> LinkValidation:
    """
    Classify links as internal or external and score their validity.

    ``settings.link_check_settings`` is accepted for interface stability but
    does not change the result: the default checker performs no I/O and
    treats every link as valid.
    """
    checker = checker or AssumeValidLinkChecker()
    internal: List[InternalLink] = []
    external: List[ExternalLink] = []
    broken: List[BrokenLink] = []

    links = extract_links(text)
    for link in links:
        if link.is_internal:
            is_valid = checker.check_internal(link)
            internal.append(
                InternalLink(
                    text=link.text, target=link.url, line=link.line, is_valid=is_valid
                )
            )
            if not is_valid:
                broken.append(
                    BrokenLink(
                        text=link.text,
                        url=link.url,
                        line=link.line,
                        error="Target not found",
                    )
                )
        else:
            status = checker.check_external(link)
            external.append(
                ExternalLink(text=link.text, url=link.url, line=link.line, status=status)
            )
            if status != "valid":
                broken.append(
                    BrokenLink(
                        text=link.text,
                        url=link.url,
                        line=link.line,
                        error=f"Link {status}",
                    )
                )

    total = len(links)
    valid = sum(1 for link in internal if link.is_valid) + sum(
        1 for link in external if link.status == "valid"
    )
    score = int(round_half_up(valid / total * 100)) if total else 100

    return LinkValidation(
        score=score,
        total_links=total,
        valid_links=valid,
        broken_links=tuple(broken),
        internal_links=tuple(internal),
        external_links=tuple(external),
    )
