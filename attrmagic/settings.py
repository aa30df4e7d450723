"""a place to collect the attrmagic settings

A user can override the settings via dynaconf, either through environment
variables prefixed with `ATTRMAGIC_` or through a `~/.attrmagic.toml` file.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from dynaconf import Dynaconf
from dynaconf import ValidationError
from dynaconf import Validator

__all__ = [
    "settings",
    "settings_dict",
]


def validate_positive(value: Any) -> bool:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValidationError(f"must be a positive integer, got: {value!r}")
    return True


def _make_settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="ATTRMAGIC",
        settings_file=[".attrmagic.toml"],
        root_path=Path.home(),
        core_loaders=["TOML"],
        validators=[
            Validator(
                "repr_maxstring", cast=int, default=60, condition=validate_positive
            ),
            Validator(
                "repr_maxother", cast=int, default=60, condition=validate_positive
            ),
            Validator(
                "repr_maxlist", cast=int, default=5, condition=validate_positive
            ),
            Validator("log_computations", cast=bool, default=False),
        ],
    )


settings = _make_settings()


def settings_dict() -> dict[str, Any]:
    """return the effective attrmagic settings"""
    return {
        "repr_maxstring": settings.repr_maxstring,
        "repr_maxother": settings.repr_maxother,
        "repr_maxlist": settings.repr_maxlist,
        "log_computations": settings.log_computations,
    }
