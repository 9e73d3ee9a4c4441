"""Configuration management for gomark."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError


class ParserConfig(BaseModel):
    """Configuration for the listing parser."""

    doc_indent: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Width of the space indent marking documentation lines",
    )

    @property
    def indent(self) -> str:
        """The literal indent prefix."""
        return " " * self.doc_indent


class GoDocConfig(BaseModel):
    """Configuration for the ``go doc`` invocation."""

    go_binary: str = Field(default="go", description="Go toolchain executable")
    timeout: float | None = Field(
        default=None, gt=0, description="Seconds before go doc is abandoned"
    )

    @field_validator("go_binary")
    @classmethod
    def validate_binary(cls, value: str) -> str:
        """Reject an empty executable name."""
        if not value.strip():
            raise ValueError("go_binary must not be empty")
        return value.strip()


class RenderConfig(BaseModel):
    """Configuration for Markdown rendering."""

    template_dir: str | None = Field(
        default=None, description="Directory holding custom templates"
    )
    template_name: str = Field(
        default="default.md.j2", description="Template file to render"
    )


class GomarkConfig(BaseModel):
    """Complete configuration for gomark."""

    version: int = 1
    parser: ParserConfig = Field(default_factory=ParserConfig)
    godoc: GoDocConfig = Field(default_factory=GoDocConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @classmethod
    def from_yaml(cls, file_path: str | Path) -> "GomarkConfig":
        """Load configuration from YAML file."""
        import yaml  # type: ignore[import-untyped]

        try:
            with open(file_path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(
                f"Cannot read config file {file_path}: {e}",
                recovery_hint="Check that the --config path exists",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}") from e

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {file_path}: {e}") from e
