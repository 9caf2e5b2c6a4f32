"""Configuration of volumes and logging."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Annotated, Literal, Self

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from safir.logging import LogLevel, Profile, configure_logging

from .constants import (
    CONFIGMAP_VOLUME_PREFIX,
    ENV_PREFIX,
    KUBERNETES_NAME_PATTERN,
    ROOT_LOGGER,
)
from .models.volumes import (
    ConfigMapVolumeOptions,
    EmptyDirVolumeOptions,
    KeyToPathOptions,
)

__all__ = [
    "Config",
    "ConfigMapSourceConfig",
    "EmptyDirSourceConfig",
    "VolumeConfig",
    "VolumeMountConfig",
]


class ConfigMapSourceConfig(BaseModel):
    """``ConfigMap`` whose keys populate the volume."""

    model_config = ConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    type: Literal["configMap"]

    config_map_name: Annotated[
        str,
        Field(
            title="ConfigMap name",
            description="Name of the ConfigMap to mount",
            examples=["app-settings"],
        ),
    ]

    default_mode: Annotated[
        int | None,
        Field(
            title="Default file mode",
            description="Permission bits for created files",
            examples=[0o644],
        ),
    ] = None

    optional: Annotated[
        bool | None,
        Field(
            title="Is optional",
            description="Whether the ConfigMap or its keys may be missing",
        ),
    ] = None

    items: Annotated[
        dict[str, KeyToPathOptions] | None,
        Field(
            title="Projected keys",
            description="Mapping of ConfigMap keys to files in the volume",
        ),
    ] = None

    def to_options(self, name: str | None) -> ConfigMapVolumeOptions:
        """Convert to the options for building the volume.

        Parameters
        ----------
        name
            Name of the volume, or `None` to derive it from the ConfigMap.
        """
        return ConfigMapVolumeOptions(
            name=name,
            default_mode=self.default_mode,
            optional=self.optional,
            items=self.items,
        )


class EmptyDirSourceConfig(EmptyDirVolumeOptions):
    """Empty directory that lives as long as the pod."""

    type: Literal["emptyDir"]


class VolumeConfig(BaseModel):
    """A volume that may be mounted inside a container."""

    model_config = ConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    name: Annotated[
        str | None,
        Field(
            title="Name of volume",
            description=(
                "Used as the Kubernetes volume name and therefore must be a"
                " valid Kubernetes name. May be omitted for ConfigMap"
                " volumes, which then get a name derived from the ConfigMap."
            ),
            pattern=KUBERNETES_NAME_PATTERN,
        ),
    ] = None

    source: Annotated[
        ConfigMapSourceConfig | EmptyDirSourceConfig,
        Field(title="Source of volume", discriminator="type"),
    ]

    @model_validator(mode="after")
    def _validate_name(self) -> Self:
        is_empty_dir = isinstance(self.source, EmptyDirSourceConfig)
        if self.name is None and is_empty_dir:
            raise ValueError("emptyDir volumes must have a name")
        if not re.match(KUBERNETES_NAME_PATTERN, self.volume_name):
            msg = f"Derived volume name {self.volume_name} is invalid"
            raise ValueError(msg)
        return self

    @property
    def volume_name(self) -> str:
        """Name the resulting volume will have."""
        if self.name is not None:
            return self.name
        match self.source:
            case ConfigMapSourceConfig() as source:
                return CONFIGMAP_VOLUME_PREFIX + source.config_map_name
            case _:
                raise ValueError("emptyDir volumes must have a name")


class VolumeMountConfig(BaseModel):
    """The mount of a volume inside a container."""

    model_config = ConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    container_path: Annotated[
        str,
        Field(
            title="Path inside container",
            description="Absolute path at which to mount the volume",
            examples=["/etc/app"],
            pattern="^/.*",
        ),
    ]

    sub_path: Annotated[
        str | None,
        Field(
            title="Sub-path of source to mount",
            description="Mount only this sub-path of the volume source",
            examples=["settings.json"],
        ),
    ] = None

    read_only: Annotated[
        bool,
        Field(
            title="Is read-only",
            description="Whether this mount of the volume should be read-only",
            examples=[True],
        ),
    ] = False

    volume_name: Annotated[
        str,
        Field(title="Volume name", description="Name of the volume to mount"),
    ]


class EnvFirstSettings(BaseSettings):
    """Base class for Pydantic settings with environment overrides.

    Classes that inherit from this base class will prioritize environment
    variables over arguments to the class constructor.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, extra="forbid", validate_by_name=True
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Override the sources of settings.

        Deactivate :file:`.env` and secret file support. Init parameters come
        from the YAML configuration file, and environment variables take
        precedence over them.
        """
        return (env_settings, init_settings)


class Config(EnvFirstSettings):
    """Configuration for synthesizing pod volumes."""

    volumes: Annotated[
        list[VolumeConfig],
        Field(
            title="Volumes",
            description="Volumes to add to the pod",
            validation_alias=AliasChoices(ENV_PREFIX + "VOLUMES", "volumes"),
        ),
    ] = []

    volume_mounts: Annotated[
        list[VolumeMountConfig],
        Field(
            title="Volume mounts",
            description="Mounts of the volumes in the container",
            validation_alias=AliasChoices(
                ENV_PREFIX + "VOLUME_MOUNTS", "volumeMounts"
            ),
        ),
    ] = []

    debug: Annotated[
        bool,
        Field(
            title="Show debug output and log style",
            description=(
                "If True, then log level will be set to debug and output will"
                " be non-structured and human-readable."
            ),
            validation_alias=AliasChoices(ENV_PREFIX + "DEBUG", "debug"),
        ),
    ] = False

    log_profile: Annotated[
        Profile,
        Field(
            title="Logging profile",
            validation_alias=AliasChoices(
                ENV_PREFIX + "LOG_PROFILE", "logProfile"
            ),
        ),
    ] = Profile.production

    log_level: Annotated[
        LogLevel,
        Field(
            title="Log level",
            validation_alias=AliasChoices(
                ENV_PREFIX + "LOG_LEVEL", "logLevel"
            ),
        ),
    ] = LogLevel.INFO

    @model_validator(mode="after")
    def _validate_mounts(self) -> Self:
        names = {v.volume_name for v in self.volumes}
        for mount in self.volume_mounts:
            if mount.volume_name not in names:
                msg = f"Mount of unknown volume {mount.volume_name}"
                raise ValueError(msg)
        return self

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Construct the configuration from a YAML file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        Config
            The corresponding configuration.
        """
        with path.open("r") as f:
            config = cls.model_validate(yaml.safe_load(f) or {})
        config.configure_logging()
        return config

    def configure_logging(self) -> None:
        """Configure logging based on the configuration."""
        if self.debug:
            log_level = LogLevel.DEBUG
            log_profile = Profile.development
        else:
            log_level = self.log_level
            log_profile = self.log_profile

        configure_logging(
            profile=log_profile,
            log_level=log_level,
            name=ROOT_LOGGER,
        )
