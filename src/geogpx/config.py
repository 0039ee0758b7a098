"""Configuration management using Pydantic settings.

Settings are built only from explicit keyword arguments. Environment
variables and ``.env`` files are never consulted, so conversion output does
not depend on the host process.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class Settings(BaseSettings):
    """Conversion defaults.

    Example:
        Settings(extension_prefix="extension_", include_elevation=True)
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="forbid",
        frozen=True,
    )

    # Prepended to the tag name of each <extensions> child so vendor fields
    # never collide with standard GPX properties. "extension_" is the other
    # prefix seen in the wild.
    extension_prefix: str = "ex_"

    # Default for GpxConverter when no explicit flag is given
    include_elevation: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Constructor arguments only
        return (init_settings,)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the shared default settings."""
    return Settings()
