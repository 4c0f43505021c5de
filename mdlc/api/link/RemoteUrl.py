"""RemoteUrl target kind (UNO: single model)."""

from dataclasses import dataclass
from urllib.parse import urlsplit


@dataclass(frozen=True)
class RemoteUrl:
    """An http or https target."""

    scheme: str
    url: str

    @property
    def host(self) -> str:
        """Host (with port) used as the throttling key."""
        return urlsplit(self.url).netloc.lower()
