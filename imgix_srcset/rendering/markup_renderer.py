"""
Responsive <img> markup rendering.
"""

import time
from typing import List, Optional

from imgix_srcset.models import RenderConfig, SrcsetCandidate
from imgix_srcset.urls.url_builder import CdnClientFactory, URLBuilder
from imgix_srcset.utils.render_logger import LoggedCdnClient, get_logger
from imgix_srcset.widths.calculator import WidthCalculator


# Assumes the image sits in a 540px column on wide screens, full width otherwise
DEFAULT_SIZES = "(min-width: 540px) 540px, 100vw"


class MarkupRenderer:
    """Renders an <img> element for a raw image reference."""

    def __init__(
        self,
        calculator: Optional[WidthCalculator] = None,
        client_factory: Optional[CdnClientFactory] = None
    ):
        """
        Initialize the renderer.

        Args:
            calculator: Width calculator (default: full device catalog).
            client_factory: CDN client factory passed to each URLBuilder.
        """
        self.calculator = calculator or WidthCalculator()
        self.client_factory = client_factory
        self.logger = get_logger()

    def render(self, raw_reference: str, config: RenderConfig) -> str:
        """
        Render markup for a raw image reference.

        Outside production the reference is emitted as a plain <img>. In
        production every breakpoint width gets a CDN URL; the largest one
        doubles as the fallback src.

        Args:
            raw_reference: Image path or URL as written in the content.
            config: Render configuration for this call.

        Returns:
            HTML string for a single <img> element.
        """
        start_time = time.time()
        raw_src = raw_reference.strip()

        if not config.is_production:
            markup = f"<img src='{raw_src}' />"
            self.logger.log_render(raw_src, config.mode.value, 0, start_time, time.time())
            return markup

        candidates = self.srcset_candidates(raw_src, config)
        srcset = ", ".join(candidate.descriptor() for candidate in candidates)
        default_src = candidates[-1].url

        self.logger.log_render(
            raw_src,
            config.mode.value,
            len(candidates),
            start_time,
            time.time(),
            metadata={"host": config.cdn_host, "max_width": candidates[-1].width},
        )

        return f"<img srcset='{srcset}' src='{default_src}' sizes='{DEFAULT_SIZES}' />"

    def srcset_candidates(self, raw_src: str, config: RenderConfig) -> List[SrcsetCandidate]:
        """One candidate per breakpoint width, ascending."""
        builder = URLBuilder(
            config,
            client_factory=self.client_factory,
            wrap_client=LoggedCdnClient,
        )
        return [
            SrcsetCandidate(url=builder.build_url(raw_src, width), width=width)
            for width in self.calculator.compute_breakpoints()
        ]


def render_image_tag(
    raw_reference: str,
    config: RenderConfig,
    client_factory: Optional[CdnClientFactory] = None
) -> str:
    """Render markup with the default width calculator."""
    return MarkupRenderer(client_factory=client_factory).render(raw_reference, config)
