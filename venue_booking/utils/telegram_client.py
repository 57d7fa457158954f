import logging

import requests

from venue_booking.core.config import settings

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"


class TelegramNotifier:
    """Sends staff notifications to a Telegram chat through the Bot API."""

    def __init__(self, bot_token: str | None, chat_id: str | None, timeout: float = 10):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    def send_message(self, text: str) -> bool:
        if not self.enabled:
            logger.info("Telegram notifications are not configured, message skipped")
            return False

        chat_id = int(self.chat_id) if str(self.chat_id).lstrip("-").isdigit() else self.chat_id

        try:
            response = requests.post(
                TELEGRAM_API_URL.format(token=self.bot_token),
                data={"chat_id": chat_id, "text": text},
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            logger.error("Failed to send Telegram message: %s", exc)
            return False

        if not body.get("ok"):
            logger.error("Telegram rejected message: %s", body.get("description"))
            return False

        return True


telegram_notifier = TelegramNotifier(settings.TELEGRAM_BOT_TOKEN, settings.TELEGRAM_CHAT_ID)
