"""
Expansion of `{% image_tag <reference> %}` tags in templated content.
"""

import re
from typing import List, Optional

from imgix_srcset.models import RenderConfig
from imgix_srcset.rendering.markup_renderer import MarkupRenderer


TAG_NAME = "image_tag"

TAG_PATTERN = re.compile(r"\{%-?\s*" + TAG_NAME + r"\s+(?P<reference>.*?)\s*-?%\}", re.DOTALL)


def find_image_tags(content: str) -> List[str]:
    """Raw references of every image tag in `content`, in order."""
    return [match.group("reference") for match in TAG_PATTERN.finditer(content)]


def expand_image_tags(
    content: str,
    config: RenderConfig,
    renderer: Optional[MarkupRenderer] = None
) -> str:
    """
    Replace every image tag in `content` with rendered <img> markup.

    Args:
        content: Template source.
        config: Render configuration shared by every tag in this content.
        renderer: Renderer to use (default: MarkupRenderer()).

    Returns:
        Content with tags expanded; everything else is left as-is.
    """
    renderer = renderer or MarkupRenderer()
    return TAG_PATTERN.sub(lambda match: renderer.render(match.group("reference"), config), content)
