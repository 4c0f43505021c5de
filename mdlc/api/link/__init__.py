"""Link extraction and resolution engine."""

from .AnchorIndex import AnchorIndex
from .classify_target import classify_target
from .Coordinator import Coordinator
from .extract_anchors import extract_anchors
from .extract_links import extract_links
from .Ignored import Ignored
from .LinkOccurrence import LinkOccurrence
from .LinkStatus import LinkStatus
from .LocalAnchor import LocalAnchor
from .LocalPath import LocalPath
from .RemoteUrl import RemoteUrl
from .slugify import slugify, unique_slugs
from .TargetKind import TargetKind
from .ValidationResult import ValidationResult, all_valid
from .walk_markdown_files import walk_markdown_files

__all__ = [
    "AnchorIndex",
    "Coordinator",
    "Ignored",
    "LinkOccurrence",
    "LinkStatus",
    "LocalAnchor",
    "LocalPath",
    "RemoteUrl",
    "TargetKind",
    "ValidationResult",
    "all_valid",
    "classify_target",
    "extract_anchors",
    "extract_links",
    "slugify",
    "unique_slugs",
    "walk_markdown_files",
]
