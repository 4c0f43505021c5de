"""Unit tests for mdlc.api.StageResult module."""

from collections.abc import Iterator

from mdlc.api.StageResult import StageResult


def test_stage_result_initialization():
    """Test that StageResult initializes correctly."""

    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)

    assert result.announce == "Testing"
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_stage_result_callback_fills_fields():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Halfway")
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"value": 1}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    progress = list(result.progress_callback(result))

    assert progress == [(0.5, "Halfway"), (1.0, "Complete")]
    assert result.result == "Done"
    assert result.output == {"value": 1}
    assert result.success is True
