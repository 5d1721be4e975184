from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

CONFIG_FILENAME = ".blogcorpus.toml"


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to 'site_root' unless absolute.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )
    posts_dir: Path = Field(default=Path("posts"), description="Directory holding the Markdown posts")
    output_dir: Path = Field(default=Path("site/docs/posts"), description="MkDocs export directory")

    @property
    def abs_posts_dir(self) -> Path:
        return self.resolve(self.posts_dir)

    @property
    def abs_output_dir(self) -> Path:
        return self.resolve(self.output_dir)

    def resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class LoaderSettings(BaseModel):
    """How posts are discovered and read."""

    pattern: str = Field(default="**/*.md", description="Glob pattern for post files")
    encoding: str = Field(default="utf-8", description="Encoding used to read post files")
    strict: bool = Field(default=False, description="Abort on the first malformed post")


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO", description="Root log level")
    file: Path | None = Field(default=None, description="Optional log file, relative to site_root")


class BlogCorpusConfig(BaseSettings):
    """Root configuration.

    Supports environment variable overrides with the pattern
    BLOGCORPUS_SECTION__KEY (e.g., BLOGCORPUS_PATHS__POSTS_DIR).
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    loader: LoaderSettings = Field(default_factory=LoaderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="BLOGCORPUS_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "BlogCorpusConfig":
        """Load configuration from .blogcorpus.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (BLOGCORPUS_SECTION__KEY)
        2. Config file (.blogcorpus.toml in site_root)
        3. Defaults
        """
        root_path = site_root if site_root is not None else Path.cwd()
        file_settings = TomlConfigSettingsSource(cls, toml_file=root_path / CONFIG_FILENAME)()
        file_settings.setdefault("paths", {})["site_root"] = root_path
        return cls(**file_settings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # the file reaches the model as init kwargs, which env must override
        return env_settings, init_settings, dotenv_settings, file_secret_settings
