from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    APP_ENV: str = "development"

    # HTTP client
    HTTP_TIMEOUT: float = 10.0
    NOTIFY_CONCURRENT: bool = False

    # Telegram bot
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_CHAT_ID: str = ""

    # LINE push
    LINE_CHANNEL_TOKEN: str = ""
    LINE_TO: str = ""
    LINE_ACCUMULATE: bool = False  # keep the message batch across sends

    # Discord bot
    DISCORD_BOT_TOKEN: str = ""
    DISCORD_CHANNEL_ID: str = ""

    # Discord-style webhooks, comma separated
    DISCORD_WEBHOOK_URLS: str = ""

    @property
    def webhook_urls(self) -> list[str]:
        return [u.strip() for u in self.DISCORD_WEBHOOK_URLS.split(",") if u.strip()]


settings = Settings()
