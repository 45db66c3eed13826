from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from exporter.sizer.factory import SizerType

LogFormat = Literal['json', 'text']


class Settings(BaseSettings):
    model_config = {
        'extra': 'ignore',
        'env_file': '.env',
        'env_file_encoding': 'utf-8',
        'frozen': True,
    }

    SERVICE_NAME: str = 'exporter'
    SERVICE_VERSION: str = '0.1.0'
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: LogFormat = 'json'

    SIZER_TYPE: SizerType = SizerType.ITEMS
    BATCH_MAX_SIZE: int = Field(default=8192, gt=0)


settings = Settings()
