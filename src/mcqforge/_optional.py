# src/mcqforge/_optional.py
"""Placeholders for classes whose optional extra is not installed."""

from __future__ import annotations

from typing import Any, NoReturn


def missing_extra(class_name: str, extra: str, error: ImportError) -> type:
    """Build a stand-in for ``class_name`` that fails when instantiated.

    Importing the package keeps working without the extra; the failure is
    deferred to the first use and names the extra to install.

    Args:
        class_name: Public name of the unavailable class.
        extra: The mcqforge extra that provides it, e.g. "chroma".
        error: The ImportError raised while importing the real class.
    """
    missing_module = error.name or str(error)

    def __init__(self: Any, *args: Any, **kwargs: Any) -> NoReturn:
        raise ImportError(
            f"{class_name} needs '{missing_module}', which is not installed. "
            f"Install it with: pip install mcqforge[{extra}]",
            name=error.name,
        ) from error

    return type(
        class_name,
        (),
        {
            "__init__": __init__,
            "__module__": "mcqforge",
            "__doc__": f"Unavailable: install mcqforge[{extra}] to use {class_name}.",
            "missing_extra": extra,
        },
    )
