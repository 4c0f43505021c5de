"""Constants for link checking (private)."""

# Link status states
STATUS_VALID = "valid"
STATUS_BROKEN = "broken"
STATUS_SKIPPED = "skipped"

# Link syntax that produced an occurrence
LINK_TYPE_INLINE = "inline"
LINK_TYPE_IMAGE = "image"
LINK_TYPE_REFERENCE = "reference"
LINK_TYPE_AUTOLINK = "autolink"
LINK_TYPE_BARE_URL = "bare_url"

# Broken reasons
REASON_PATH_NOT_FOUND = "path not found"
REASON_ANCHOR_NOT_FOUND = "anchor not found"
REASON_TIMED_OUT = "timed out"
REASON_SCHEME_NOT_CHECKED = "scheme not checked"
REASON_REMOTE_DISABLED = "remote checks disabled"

REMOTE_SCHEMES = frozenset({"http", "https"})

# HEAD answers that mean "try GET instead"
HEAD_FALLBACK_STATUS = frozenset({403, 405, 501})
