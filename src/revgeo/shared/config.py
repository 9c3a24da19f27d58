from pydantic_settings import BaseSettings

from revgeo.shared.constants import MAPBOX_ENDPOINT


class Settings(BaseSettings):
    MAPBOX_ENDPOINT: str = MAPBOX_ENDPOINT
    MAPBOX_ACCESS_TOKEN: str = ""         # https://account.mapbox.com/access-tokens/
    VERBOSE_LOGGING: bool = False         # echo raw response bodies
    ORIGIN_UTM_EAST: float = 0.0          # UTM position of the local origin
    ORIGIN_UTM_NORTH: float = 0.0
    ORIGIN_UTM_ZONE: int = 32
    ORIGIN_UTM_NORTHERN: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
