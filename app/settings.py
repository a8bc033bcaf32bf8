from importlib import resources
from pathlib import Path
from urllib.request import getproxies

import dotenv
from loguru import logger
from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from telegram.ext import Application

from models import GenerationSettings

dotenv.load_dotenv()


SYSTEM_INSTRUCTIONS_RESOURCE = "system_instructions.txt"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    TELEGRAM_BOT_API_TOKEN: SecretStr = Field(
        default="", description="Bot API token issued by https://t.me/BotFather"
    )

    GEMINI_API_KEY: SecretStr = Field(
        default="", description="API key for the Google Generative Language API"
    )

    GEMINI_MODEL: str = Field(
        default="gemini-1.5-flash", description="Model name used for every chat session"
    )

    SYSTEM_INSTRUCTIONS_PATH: Path | None = Field(
        default=None,
        description="Text file passed verbatim to the model as its system instruction. "
        "Defaults to the instruction file shipped inside the taobot package.",
    )

    PORT: int = Field(default=3000, description="Port of the HTTP listener")

    GENERATION_TEMPERATURE: float = Field(default=0.4)

    GENERATION_TOP_P: float = Field(default=0.95)

    GENERATION_TOP_K: int = Field(default=64)

    GENERATION_MAX_OUTPUT_TOKENS: int = Field(default=2000)

    TAGALL_BATCH_SIZE: int = Field(
        default=500, gt=0, description="Maximum number of mentions carried by one broadcast"
    )

    TAGALL_BATCH_DELAY: float = Field(
        default=1.0, ge=0, description="Seconds to wait between two consecutive broadcasts"
    )

    HTTP_REQUEST_TIMEOUT: float = Field(
        default=75.0, description="Timeout (seconds) for Telegram Bot API calls"
    )

    SHUTDOWN_TIMEOUT: float = Field(
        default=30.0,
        description="Seconds to wait for in-flight message tasks before cancelling them on exit",
    )

    LOG_LEVEL: str = Field(default="DEBUG", description="Level of the stdout log sink")

    LOG_TIMEZONE: str = Field(default="UTC", description="Timezone used to render log timestamps")

    LOG_DIR: Path = Field(
        default=Path("logs"), description="Directory of runtime.log and error.log"
    )

    @property
    def generation_settings(self) -> GenerationSettings:
        return GenerationSettings(
            temperature=self.GENERATION_TEMPERATURE,
            top_p=self.GENERATION_TOP_P,
            top_k=self.GENERATION_TOP_K,
            max_output_tokens=self.GENERATION_MAX_OUTPUT_TOKENS,
        )

    def load_system_instruction(self) -> str:
        """Read the system instruction blob once at start-up."""
        source = self.SYSTEM_INSTRUCTIONS_PATH or resources.files("taobot").joinpath(
            SYSTEM_INSTRUCTIONS_RESOURCE
        )
        instruction = source.read_text(encoding="utf-8")
        logger.debug(f"Loaded system instruction from {source} ({len(instruction)} chars)")
        return instruction

    def get_default_application(self) -> Application:
        _base_builder = (
            Application.builder()
            .token(self.TELEGRAM_BOT_API_TOKEN.get_secret_value())
            .connect_timeout(self.HTTP_REQUEST_TIMEOUT)
            .write_timeout(self.HTTP_REQUEST_TIMEOUT)
            .read_timeout(self.HTTP_REQUEST_TIMEOUT)
        )
        if proxy_url := getproxies().get("http"):
            logger.success(f"Using proxy: {proxy_url}")
            application = _base_builder.proxy(proxy_url).get_updates_proxy(proxy_url).build()
        else:
            application = _base_builder.build()

        return application


settings = Settings()  # type: ignore
