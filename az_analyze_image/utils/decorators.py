import functools
import warnings

from az_analyze_image.config import AnalyzeImagePreviewWarning


def preview(info: str):
    """Create a decorator that marks callables as targeting a preview API version.

    This decorator will emit a warning when the decorated callable is invoked,
    indicating that the remote API it talks to is a preview release that the
    vendor may change or retire.

    Args:
        info (str): Information about the preview status of the callable.

    Returns:
        callable: A decorator function that can be applied to mark callables as preview.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            warnings.warn(
                f"{func.__qualname__} targets a preview API: {info}",
                category=AnalyzeImagePreviewWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        return wrapper

    return decorator
