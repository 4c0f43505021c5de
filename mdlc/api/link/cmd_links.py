"""Link listing API command.

CLI: mdlc links <path>
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.link import LinkLinksOutput


def cmd_links(path: str) -> StageResult:
    """List link occurrences and how each target is classified, without checking them.

    Args:
        path: Markdown file or directory
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.MdlcConfig import MdlcConfig
        from ..config.normalize_path import normalize_path
        from .Coordinator import Coordinator
        from .extract_links import extract_links
        from .TargetKind import kind_to_dict
        from .walk_markdown_files import walk_markdown_files

        def fail(message: str) -> None:
            result_obj.output = LinkLinksOutput(
                errors=[message], warnings=[], path=path, files_scanned=0, links=[]
            ).model_dump(mode="python")
            result_obj.result = f"Link listing failed: {message}"
            result_obj.success = False

        yield (0.2, "Loading configuration...")
        try:
            config = MdlcConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        root = normalize_path(path)
        if not root.exists():
            fail(f"Path not found: {path}")
            return

        yield (0.5, "Extracting links...")
        coordinator = Coordinator(
            config.check,
            project_root=root if root.is_dir() else root.parent,
            markdown_extensions=config.walk.extensions,
        )
        errors: list[str] = []
        links: list[dict] = []
        files = list(walk_markdown_files(root, config.walk))
        for file_path in files:
            try:
                text = file_path.read_text(encoding="utf-8-sig")
            except (OSError, UnicodeDecodeError) as exc:
                errors.append(f"Cannot read {file_path}: {exc}")
                continue
            for occurrence in extract_links(text, file_path, bare_urls=config.check.bare_urls):
                links.append(
                    {
                        "source_file": str(occurrence.source_file),
                        "line": occurrence.line,
                        "column": occurrence.column,
                        "raw_target": occurrence.raw_target,
                        "link_text": occurrence.link_text,
                        "link_type": occurrence.link_type,
                        "target": kind_to_dict(coordinator.classify(occurrence)),
                    }
                )

        yield (1.0, "Complete")
        result_obj.output = LinkLinksOutput(
            errors=errors,
            warnings=[],
            path=str(Path(path)),
            files_scanned=len(files),
            links=links,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links)} links in {len(files)} files"
        result_obj.success = not errors

    return StageResult(
        announce=f"Listing links in {path}...",
        progress_callback=do_work,
    )
