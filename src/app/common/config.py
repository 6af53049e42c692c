"""Backend configurations."""

import logging

import dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

dotenv.load_dotenv(override=True)


class Config(BaseSettings):
    """Configuration for the backend."""

    model_config = SettingsConfigDict(env_prefix="SOILDESC_")

    ###########################################################
    # Logging
    ###########################################################
    logging_level: int = logging.DEBUG
    logging_format: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logger_name: str = "soildesc"

    ###########################################################
    # Descriptions
    ###########################################################
    # longest original description that can be stored alongside a parsed description
    max_description_length: int = 255


config = Config()
