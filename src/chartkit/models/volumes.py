"""Options for constructing volumes."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..units import Size
from .kubernetes import EmptyDirMedium

__all__ = [
    "ConfigMapVolumeOptions",
    "EmptyDirVolumeOptions",
    "KeyToPathOptions",
]


def _parse_size(v: object) -> object:
    """Pydantic validator that converts size strings to `Size`."""
    if isinstance(v, str):
        return Size.parse(v)
    if isinstance(v, int) and not isinstance(v, bool):
        return Size.from_bytes(v)
    return v


class KeyToPathOptions(BaseModel):
    """Projection of a single ``ConfigMap`` key into the volume."""

    model_config = ConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    path: Annotated[
        str,
        Field(
            title="Path",
            description=(
                "Relative path of the file to map the key to. May not contain"
                " the path element ``..`` or start with ``..``."
            ),
            examples=["path/to/settings.json"],
        ),
    ]

    mode: Annotated[
        int | None,
        Field(
            title="File mode",
            description=(
                "Permission bits for this file. If not set, the volume"
                " default mode is used."
            ),
            examples=[0o644],
        ),
    ] = None


class ConfigMapVolumeOptions(BaseModel):
    """Options for a volume backed by a ``ConfigMap``."""

    model_config = ConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    name: Annotated[
        str | None,
        Field(
            title="Volume name",
            description=(
                "Name of the volume. If not set, a name is derived from the"
                " name of the ``ConfigMap``."
            ),
            examples=["config"],
        ),
    ] = None

    default_mode: Annotated[
        int | None,
        Field(
            title="Default file mode",
            description=(
                "Permission bits for created files unless overridden by an"
                " item"
            ),
            examples=[0o644],
        ),
    ] = None

    optional: Annotated[
        bool | None,
        Field(
            title="Is optional",
            description=(
                "Whether the ``ConfigMap`` or its keys may be missing. If not"
                " set, the Kubernetes default applies."
            ),
        ),
    ] = None

    items: Annotated[
        dict[str, KeyToPathOptions] | None,
        Field(
            title="Projected keys",
            description=(
                "Mapping of ``ConfigMap`` keys to files. If set, only these"
                " keys are projected into the volume instead of every key."
            ),
        ),
    ] = None


class EmptyDirVolumeOptions(BaseModel):
    """Options for an ``emptyDir`` volume."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    medium: Annotated[
        EmptyDirMedium | None,
        Field(
            title="Storage medium",
            description=(
                "Storage medium backing the directory. If not set, the field"
                " is omitted and Kubernetes chooses."
            ),
            examples=[EmptyDirMedium.MEMORY],
        ),
    ] = None

    size_limit: Annotated[
        Size | None,
        BeforeValidator(_parse_size),
        Field(
            title="Size limit",
            description="Total amount of local storage the volume may use",
            examples=["20Gi"],
        ),
    ] = None
