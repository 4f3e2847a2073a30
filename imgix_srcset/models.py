"""
Data models and schemas for responsive image rendering.
"""

import math
from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, PositiveFloat, PositiveInt


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with .5 going away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class DeviceFamily(str, Enum):
    """Logical grouping of device profiles."""
    PHONE = "phone"
    PHABLET = "phablet"
    TABLET = "tablet"
    FRAMEWORK = "framework"


class DeviceProfile(BaseModel):
    """A single viewport/density combination of a real device."""
    name: str
    family: DeviceFamily
    css_width: PositiveInt
    device_pixel_ratio: PositiveFloat

    class Config:
        frozen = True

    def physical_width(self) -> int:
        """Width in physical pixels for this profile."""
        return round_half_away_from_zero(self.css_width * self.device_pixel_ratio)

    def with_ratio(self, device_pixel_ratio: float, name: Optional[str] = None) -> "DeviceProfile":
        """Return a copy of this profile at another pixel density."""
        return DeviceProfile(
            name=name or self.name,
            family=self.family,
            css_width=self.css_width,
            device_pixel_ratio=device_pixel_ratio,
        )


class RenderMode(str, Enum):
    """Site environment the markup is rendered for."""
    PRODUCTION = "production"
    NON_PRODUCTION = "non_production"

    @classmethod
    def from_environment(cls, name: Optional[str]) -> "RenderMode":
        """Map an environment name (e.g. "production", "development") to a mode."""
        if name and name.strip().lower() == "production":
            return cls.PRODUCTION
        return cls.NON_PRODUCTION


class RenderConfig(BaseModel):
    """Per-render configuration supplied by the host site."""
    cdn_host: Optional[str] = None
    secure_token: Optional[str] = None
    include_library_param: bool = True
    mode: RenderMode = RenderMode.NON_PRODUCTION

    @property
    def is_production(self) -> bool:
        return self.mode == RenderMode.PRODUCTION

    @classmethod
    def from_site_config(
        cls,
        site_config: Optional[Mapping[str, Any]],
        mode: RenderMode = RenderMode.NON_PRODUCTION
    ) -> "RenderConfig":
        """
        Build a config from a site's `imgix` configuration map.

        Args:
            site_config: Mapping with optional keys `source`,
                `secure_url_token` and `include_library_param`.
            mode: Environment mode for this render.

        Returns:
            RenderConfig instance.
        """
        site_config = site_config or {}
        include_library_param = site_config.get("include_library_param", True)
        return cls(
            cdn_host=site_config.get("source"),
            secure_token=site_config.get("secure_url_token"),
            # An explicit null disables the param; a missing key keeps it on
            include_library_param=False if include_library_param is None else include_library_param,
            mode=mode,
        )


class CdnClientOptions(BaseModel):
    """Construction-time options handed to a CDN client."""
    host: Optional[str] = None
    library_name: str
    library_version: str
    use_https: bool = True
    secure_token: Optional[str] = None
    include_library_param: bool = True

    class Config:
        frozen = True


class SrcsetCandidate(BaseModel):
    """One width-tagged URL in a srcset attribute."""
    url: str
    width: PositiveInt

    def descriptor(self) -> str:
        return f"{self.url} {self.width}w"


class ParsedImageTag(BaseModel):
    """Attributes recovered from rendered <img> markup."""
    src: Optional[str] = None
    sizes: Optional[str] = None
    srcset: List[SrcsetCandidate] = Field(default_factory=list)

    def widths(self) -> List[int]:
        return [candidate.width for candidate in self.srcset]
