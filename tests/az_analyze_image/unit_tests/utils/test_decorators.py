import pytest

from az_analyze_image.config import AnalyzeImagePreviewWarning
from az_analyze_image.utils.decorators import preview


def test_preview_decorator_warns_and_calls_function() -> None:
    # given
    @preview(info="may change")
    def example(value: int) -> int:
        return value * 2

    # when
    with pytest.warns(AnalyzeImagePreviewWarning) as record:
        result = example(21)

    # then
    assert result == 42
    assert "example targets a preview API: may change" in str(record[0].message)


def test_preview_decorator_keeps_function_metadata() -> None:
    # given
    @preview(info="may change")
    def example() -> None:
        """Docstring."""

    # then
    assert example.__name__ == "example"
    assert example.__doc__ == "Docstring."
