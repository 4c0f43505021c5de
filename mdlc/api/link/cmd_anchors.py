"""Anchor listing API command.

CLI: mdlc anchors <file>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.link import LinkAnchorsOutput


def cmd_anchors(path: str) -> StageResult:
    """List the anchors a Markdown file exposes to '#fragment' links.

    Args:
        path: Markdown file
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.normalize_path import normalize_path
        from .extract_anchors import extract_anchors

        yield (0.3, "Reading file...")
        file_path = normalize_path(path)
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            result_obj.output = LinkAnchorsOutput(
                errors=[f"Cannot read {path}: {exc}"], warnings=[], path=path, anchors=[]
            ).model_dump(mode="python")
            result_obj.result = f"Cannot index anchors of {path}"
            result_obj.success = False
            return

        yield (0.7, "Indexing headings...")
        anchors = extract_anchors(text)

        yield (1.0, "Complete")
        result_obj.output = LinkAnchorsOutput(
            errors=[],
            warnings=[],
            path=path,
            anchors=anchors,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(anchors)} anchors in {path}"
        result_obj.success = True

    return StageResult(
        announce=f"Indexing anchors of {path}...",
        progress_callback=do_work,
    )
