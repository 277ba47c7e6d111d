from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class Settings(BaseSettings):
    service_name: str = "myservice"
    version: str = "0.1.0"

    host: str = "0.0.0.0"
    port: int = 8080

    # the variant without /version sets this to False
    expose_version: bool = True

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # fixed constants: no env vars, no .env, no secrets dir
        return (init_settings,)

settings = Settings()
