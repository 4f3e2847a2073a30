"""
CDN URL construction for individual breakpoint widths.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Protocol

from imgix import UrlBuilder

from imgix_srcset import LIBRARY_NAME, __version__
from imgix_srcset.models import CdnClientOptions, RenderConfig


class CdnClient(Protocol):
    """Anything that turns a path plus transform params into a URL."""

    def create_url(self, path: str, params: Mapping[str, Any]) -> str:
        ...


CdnClientFactory = Callable[[CdnClientOptions], CdnClient]


class ImgixCdnClient:
    """CDN client backed by the imgix URL builder."""

    def __init__(self, options: CdnClientOptions):
        """
        Initialize the client.

        Args:
            options: Host, signing and library-identification options.
                The host is handed to imgix as-is; imgix rejects hosts that
                are missing or not bare domain names.
        """
        self.options = options
        # ixlib is added below so it carries this library's identifier
        self._builder = UrlBuilder(
            options.host,
            use_https=options.use_https,
            sign_key=options.secure_token,
            include_library_param=False,
        )

    def create_url(self, path: str, params: Mapping[str, Any]) -> str:
        query: Dict[str, Any] = dict(params)
        if self.options.include_library_param:
            query["ixlib"] = f"{self.options.library_name}-{self.options.library_version}"
        return self._builder.create_url(path, query)


def client_options(config: RenderConfig) -> CdnClientOptions:
    """Options handed to the CDN client for a render config."""
    return CdnClientOptions(
        host=config.cdn_host,
        library_name=LIBRARY_NAME,
        library_version=__version__,
        use_https=True,
        secure_token=config.secure_token or None,
        include_library_param=config.include_library_param,
    )


class URLBuilder:
    """Builds one CDN URL per breakpoint width for a single render."""

    def __init__(
        self,
        config: RenderConfig,
        client_factory: Optional[CdnClientFactory] = None,
        wrap_client: Optional[Callable[[CdnClient], CdnClient]] = None
    ):
        """
        Initialize the builder.

        Args:
            config: Render configuration (host, token, library param toggle).
            client_factory: Creates the CDN client (default: ImgixCdnClient).
            wrap_client: Optional decorator applied to the created client.
        """
        self.config = config
        self.client_factory = client_factory or ImgixCdnClient
        self.wrap_client = wrap_client
        self._client: Optional[CdnClient] = None

    @property
    def client(self) -> CdnClient:
        if self._client is None:
            client = self.client_factory(client_options(self.config))
            if self.wrap_client is not None:
                client = self.wrap_client(client)
            self._client = client
        return self._client

    def build_url(self, path: str, width: int) -> str:
        """
        Build the CDN URL for `path` resized to `width`.

        Client errors are not caught here.
        """
        return self.client.create_url(path, {"w": width})


def build_url(
    path: str,
    width: int,
    config: RenderConfig,
    client_factory: Optional[CdnClientFactory] = None
) -> str:
    """Build a single CDN URL without keeping a builder around."""
    return URLBuilder(config, client_factory=client_factory).build_url(path, width)
