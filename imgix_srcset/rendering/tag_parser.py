"""
Parsing of rendered <img> markup back into its responsive attributes.
"""

from typing import List

from bs4 import BeautifulSoup

from imgix_srcset.models import ParsedImageTag, SrcsetCandidate


def parse_srcset(value: str) -> List[SrcsetCandidate]:
    """
    Split a srcset attribute into width-tagged candidates.

    Args:
        value: Attribute value such as "a.jpg?w=100 100w, a.jpg?w=200 200w".

    Returns:
        Candidates in attribute order.
    """
    candidates = []
    for entry in value.split(", "):
        entry = entry.strip()
        if not entry:
            continue

        parts = entry.rsplit(" ", 1)
        if len(parts) != 2 or not parts[1].endswith("w") or not parts[1][:-1].isdigit():
            raise ValueError(f"Malformed srcset candidate: {entry!r}")

        candidates.append(SrcsetCandidate(url=parts[0].strip(), width=int(parts[1][:-1])))

    return candidates


def parse_image_markup(html: str) -> ParsedImageTag:
    """
    Extract src, sizes and srcset from the first <img> in `html`.

    Raises:
        ValueError: If the markup contains no <img> element.
    """
    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img")
    if img is None:
        raise ValueError("No <img> element found in markup")

    srcset = img.get("srcset")
    return ParsedImageTag(
        src=img.get("src"),
        sizes=img.get("sizes"),
        srcset=parse_srcset(srcset) if srcset else [],
    )
