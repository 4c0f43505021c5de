"""Config show command.

CLI: mdlc config show [section]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .MdlcConfig import MdlcConfig


def cmd_show(section: str = "") -> StageResult:
    """Show the effective configuration, or one section of it.

    Args:
        section: Section name (check, walk, log). Empty shows everything.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = MdlcConfig.get_config_path()
        try:
            config = MdlcConfig.load()
        except ValueError as e:
            result_obj.result = f"Failed to load config: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=str(config_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Selecting section...")
        data = config.to_dict()
        warnings = [] if config_path.exists() else [f"No config file at {config_path}, showing defaults"]
        if section and section not in data:
            result_obj.result = f"Unknown config section: {section}"
            result_obj.output = ConfigShowOutput(
                errors=[f"Unknown section '{section}', expected one of {sorted(data)}"],
                warnings=warnings,
                section=section,
                content={},
                config_path=str(config_path),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Configuration section '{section}'" if section else "Configuration"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            section=section,
            content=data[section] if section else data,
            config_path=str(config_path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing config{f' section {section}' if section else ''}...",
        progress_callback=do_work,
    )
