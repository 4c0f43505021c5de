"""Link check API command.

CLI: mdlc check <path>
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.link import LinkCheckOutput


def _failure_output(path: str, errors: list[str]) -> dict:
    return LinkCheckOutput(
        errors=errors,
        warnings=[],
        path=path,
        files_checked=0,
        links_checked=0,
        valid_count=0,
        broken_count=0,
        skipped_count=0,
        is_valid=False,
        broken=[],
        results=[],
    ).model_dump(mode="python")


def cmd_check(
    path: str,
    workers: int | None = None,
    per_host_limit: int | None = None,
    timeout_secs: float | None = None,
    retries: int | None = None,
    run_timeout_secs: float | None = None,
    project_root: str | None = None,
    ignored_schemes: list[str] | None = None,
    check_remote: bool | None = None,
    bare_urls: bool | None = None,
    exclude_globs: list[str] | None = None,
) -> StageResult:
    """Check every link in a Markdown file or directory tree.

    Arguments left as None keep the value from the config file (or its default).

    Args:
        path: Markdown file or directory to check
        workers: Maximum concurrent checks
        per_host_limit: Maximum concurrent requests per remote host
        timeout_secs: Timeout of a single HTTP attempt
        retries: Retries after transient network failures
        run_timeout_secs: Budget for the whole run
        project_root: Base directory for links starting with '/'
        ignored_schemes: URL schemes to skip instead of check
        check_remote: Check http(s) targets over the network
        bare_urls: Treat bare URLs in text as links
        exclude_globs: Extra path patterns to leave out of the walk
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ...utils.logger import configure_logging, get_logger
        from ..config.MdlcConfig import MdlcConfig
        from ..config.normalize_path import normalize_path
        from .Coordinator import Coordinator
        from .extract_links import extract_links
        from .LinkOccurrence import LinkOccurrence
        from .walk_markdown_files import walk_markdown_files

        yield (0.1, "Loading configuration...")
        try:
            config = MdlcConfig.load().with_check_overrides(
                workers=workers,
                per_host_limit=per_host_limit,
                timeout_secs=timeout_secs,
                retries=retries,
                run_timeout_secs=run_timeout_secs,
                project_root=project_root,
                ignored_schemes=ignored_schemes,
                check_remote=check_remote,
                bare_urls=bare_urls,
            )
            if exclude_globs:
                walk = config.walk.model_copy(update={"exclude_globs": [*config.walk.exclude_globs, *exclude_globs]})
                config = config.model_copy(update={"walk": walk})
        except ValueError as e:
            result_obj.output = _failure_output(path, [f"Failed to load config: {e}"])
            result_obj.result = f"Link check failed: {e}"
            result_obj.success = False
            return

        configure_logging(level=config.log.level)
        logger = get_logger("link.check")

        root = normalize_path(path)
        if not root.exists():
            result_obj.output = _failure_output(path, [f"Path not found: {path}"])
            result_obj.result = f"Link check failed: {path} not found"
            result_obj.success = False
            return

        yield (0.2, "Finding Markdown files...")
        files = list(walk_markdown_files(root, config.walk))
        warnings: list[str] = []
        if not files:
            warnings.append(f"No Markdown files found under {path}")

        yield (0.3, f"Extracting links from {len(files)} files...")
        errors: list[str] = []
        occurrences: list[LinkOccurrence] = []
        for file_path in files:
            try:
                text = file_path.read_text(encoding="utf-8-sig")
            except (OSError, UnicodeDecodeError) as exc:
                errors.append(f"Cannot read {file_path}: {exc}")
                continue
            occurrences.extend(extract_links(text, file_path, bare_urls=config.check.bare_urls))

        yield (0.5, f"Checking {len(occurrences)} links...")
        default_root = root if root.is_dir() else root.parent
        coordinator = Coordinator(config.check, project_root=default_root, markdown_extensions=config.walk.extensions)
        results = coordinator.run(occurrences)

        yield (1.0, "Complete")
        broken = [result.to_dict() for result in results if result.status.is_broken]
        valid_count = sum(1 for result in results if result.status.is_valid)
        skipped_count = sum(1 for result in results if result.status.is_skipped)
        logger.info(
            f"Checked {len(results)} links in {len(files)} files under {root}: "
            f"{len(broken)} broken, {skipped_count} skipped"
        )

        result_obj.output = LinkCheckOutput(
            errors=errors,
            warnings=warnings,
            path=str(Path(path)),
            files_checked=len(files),
            links_checked=len(results),
            valid_count=valid_count,
            broken_count=len(broken),
            skipped_count=skipped_count,
            is_valid=not broken,
            broken=broken,
            results=[result.to_dict() for result in results],
        ).model_dump(mode="python")
        result_obj.result = (
            f"Checked {len(results)} links in {len(files)} files: "
            f"{valid_count} valid, {len(broken)} broken, {skipped_count} skipped"
        )
        result_obj.success = not broken and not errors

    return StageResult(
        announce=f"Checking links in {path}...",
        progress_callback=do_work,
    )
