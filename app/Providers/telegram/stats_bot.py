"""
Telegram Stats Bot

Bot API transport for the stats commands:
- Only senders in the admin allow-list are served; anyone else is ignored
  without a reply
- Text messages are routed through the CommandRouter
- Non-text messages get an "Unsupported type" reply
- Handler results are sent as MarkdownV2 text or as a document attachment
- Handler exceptions are reported to the sender and never stop polling

Uses python-telegram-bot library with async/await for concurrent operation.
"""

from typing import FrozenSet, Iterable, Optional
from loguru import logger
from telegram import Bot, InputFile, Update
from telegram.constants import ParseMode
from telegram.ext import Application, ContextTypes, MessageHandler, filters
from telegram.helpers import effective_message_type, escape_markdown

from Commands import CommandRouter, HandlerResponse, ResponseKind
from Providers.provider import Provider

from .helpers import is_authorized


class TelegramStatsBot(Provider):
    """Telegram bot answering stats commands from authorized users"""

    def __init__(self, bot_token: str, admin_ids: Iterable[str], router: CommandRouter):
        self.bot_token = bot_token
        self.admin_ids: FrozenSet[str] = frozenset(str(admin_id) for admin_id in admin_ids)
        self.router = router
        self.app: Optional[Application] = None

    @property
    def name(self) -> str:
        """Return provider name"""
        return "telegram_stats_bot"

    async def start_monitoring(self) -> None:
        """Start polling without blocking the event loop"""
        logger.info("Initializing Telegram Stats Bot...")

        self.app = Application.builder().token(self.bot_token).build()

        # Commands reach the router as plain text messages
        self.app.add_handler(MessageHandler(filters.UpdateType.MESSAGE, self.handle_update))
        self.app.add_error_handler(self.handle_error)

        await self.app.initialize()
        await self.app.start()
        await self.app.updater.start_polling()
        logger.success(f"Telegram Stats Bot polling started ({len(self.admin_ids)} admins)")

    async def stop(self) -> None:
        """Stop the bot without closing the global event loop"""
        try:
            if self.app:
                await self.app.updater.stop()
                await self.app.stop()
                await self.app.shutdown()
                logger.info("Telegram Stats Bot stopped")
        except Exception as e:
            logger.error(f"Error stopping bot: {e}")

    async def handle_update(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Authorize, route and answer one inbound message"""
        message = update.effective_message
        if message is None:
            return

        user = update.effective_user
        user_id = user.id if user else None
        if not is_authorized(user_id, self.admin_ids):
            logger.warning(f"Ignoring message from unauthorized sender {user_id}")
            return

        chat_id = message.chat_id
        message_type = effective_message_type(message)
        if message_type != "text":
            await self.send_response(context.bot, chat_id, HandlerResponse.text(f"Unsupported type: {message_type}"))
            return

        try:
            response = await self.router.dispatch(message.text)
        except Exception as e:
            logger.error(f"Error handling '{message.text}' from {user_id}: {e}")
            await self.send_response(context.bot, chat_id, HandlerResponse.text(f"Error: {e}"))
            return

        if response.is_empty:
            return
        await self.send_response(context.bot, chat_id, response)

    @staticmethod
    async def send_response(bot: Bot, chat_id: int, response: HandlerResponse) -> None:
        """Send a handler response as a MarkdownV2 message or a document"""
        if response.kind is ResponseKind.FILE:
            document = InputFile(response.payload.encode("utf-8"), filename=response.file_name)
            if response.content_type:
                document.mimetype = response.content_type
            await bot.send_document(chat_id=chat_id, document=document)
            return

        text = response.payload if response.markdown else escape_markdown(response.payload, version=2)
        await bot.send_message(chat_id=chat_id, text=text, parse_mode=ParseMode.MARKDOWN_V2)

    async def handle_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Log errors raised outside the message handler (network, sending replies)"""
        logger.error(f"Telegram error while processing update {update}: {context.error}")
