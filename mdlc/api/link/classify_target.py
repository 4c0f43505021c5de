"""Target classifier (UNO: single function)."""

import os
import re
from collections.abc import Collection
from pathlib import Path
from urllib.parse import unquote

from ..config.CheckConfig import DEFAULT_IGNORED_SCHEMES
from ._constants import REASON_SCHEME_NOT_CHECKED, REMOTE_SCHEMES
from .Ignored import Ignored
from .LocalAnchor import LocalAnchor
from .LocalPath import LocalPath
from .RemoteUrl import RemoteUrl
from .TargetKind import TargetKind

# Two characters minimum so that "C:\docs" is a path, not a scheme
SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]+):")
EMAIL_PATTERN = re.compile(r"^[^@\s/]+@[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)*\.([A-Za-z]{2,})$")
# "icon@2x.png" is a file, not an address
FILE_SUFFIXES = frozenset({"md", "markdown", "png", "jpg", "jpeg", "gif", "svg", "webp", "pdf", "txt", "html", "htm"})


def _split_fragment(target: str) -> tuple[str, str | None]:
    if "#" in target:
        base, fragment = target.split("#", 1)
        return base, fragment
    return target, None


def classify_target(
    raw_target: str,
    source_file: Path,
    project_root: Path | None = None,
    ignored_schemes: Collection[str] = DEFAULT_IGNORED_SCHEMES,
) -> TargetKind:
    """Map a raw link target to its kind without touching the filesystem or network.

    Args:
        raw_target: Destination string exactly as written in the document
        source_file: Document containing the link
        project_root: Base for targets starting with '/'; the document's directory if None
        ignored_schemes: Lower-case schemes reported as skipped

    Returns:
        Exactly one of LocalAnchor, Ignored, RemoteUrl or LocalPath
    """
    target = raw_target.strip()

    if target.startswith("#"):
        return LocalAnchor(fragment=target[1:])

    match = SCHEME_PATTERN.match(target)
    if match:
        scheme = match.group(1).lower()
        if scheme in ignored_schemes:
            return Ignored(reason=f"{scheme} {REASON_SCHEME_NOT_CHECKED}")
        if scheme in REMOTE_SCHEMES and target[match.end() :].startswith("//"):
            return RemoteUrl(scheme=scheme, url=target)
        return Ignored(reason=f"unsupported scheme '{scheme}'")

    email = EMAIL_PATTERN.match(target)
    if email and email.group(1).lower() not in FILE_SUFFIXES:
        return Ignored(reason=f"mailto {REASON_SCHEME_NOT_CHECKED}")

    base, fragment = _split_fragment(target)
    base = base.split("?", 1)[0]
    decoded = unquote(base)

    source_dir = source_file.parent
    if not decoded:
        path = source_file
    elif decoded.startswith("/"):
        root = project_root if project_root is not None else source_dir
        path = root / decoded.lstrip("/")
    else:
        path = source_dir / decoded

    return LocalPath(path=Path(os.path.normpath(path)), fragment=fragment)
