"""Settings for a generation run."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .parser import DEFAULT_EXTENSIONS


class GenerateConfig(BaseModel):
    """Options of one generation run, as given on the command line."""

    input_path: Path = Path("./schemas")
    output_path: Path = Path("./generated-types.ts")
    skip_checks: bool = False
    debug: bool = False
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    scalars: dict[str, str] = Field(default_factory=dict)
    template_dir: Path | None = None
    header: str | None = None
    exclude_prefixes: tuple[str, ...] = ()
    exclude_suffixes: tuple[str, ...] = ()

    @field_validator("extensions")
    @classmethod
    def _check_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one schema file extension is required")
        for ext in value:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"invalid schema file extension {ext!r}, expected e.g. '.graphql'")
        return value
