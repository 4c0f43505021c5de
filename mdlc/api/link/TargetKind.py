"""TargetKind union and serialization helper."""

from typing import Any, TypeAlias

from .Ignored import Ignored
from .LocalAnchor import LocalAnchor
from .LocalPath import LocalPath
from .RemoteUrl import RemoteUrl

TargetKind: TypeAlias = LocalPath | LocalAnchor | RemoteUrl | Ignored


def kind_to_dict(kind: TargetKind) -> dict[str, Any]:
    """Flatten a target kind into a JSON-friendly dict."""
    if isinstance(kind, LocalPath):
        return {"kind": "local_path", "path": str(kind.path), "fragment": kind.fragment}
    if isinstance(kind, LocalAnchor):
        return {"kind": "local_anchor", "fragment": kind.fragment}
    if isinstance(kind, RemoteUrl):
        return {"kind": "remote_url", "scheme": kind.scheme, "url": kind.url}
    return {"kind": "ignored", "reason": kind.reason}
