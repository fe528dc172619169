"""
BOL Worker - Process Entry Point
"""
import asyncio
import logging
import signal
import sys
import structlog

from bol_worker.config import (
    AppSettings,
    get_app_settings,
    get_carrier_settings,
    get_service_settings,
)
from bol_worker.clients import PickTicketClient, RLCarrierClient
from bol_worker.worker import BolWorker

logger = structlog.get_logger()


def configure_logging(settings: AppSettings) -> None:
    """Configure structured logging on top of stdlib logging."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level.upper(),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _install_signal_handlers(stop_event: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except (NotImplementedError, ValueError):
            # Windows event loops and non-main threads; Ctrl+C still raises KeyboardInterrupt
            logger.debug("Signal handler not installed", signal=sig.name)


async def main() -> None:
    """Build the clients and run the worker until SIGINT/SIGTERM."""
    app_settings = get_app_settings()
    service_settings = get_service_settings()
    carrier_settings = get_carrier_settings()

    configure_logging(app_settings)
    logger.info("Starting BOL worker", app=app_settings.app_name)

    stop_event = asyncio.Event()
    _install_signal_handlers(stop_event)

    async with PickTicketClient(service_settings) as pick_ticket_client, \
            RLCarrierClient(carrier_settings) as carrier_client:
        worker = BolWorker(pick_ticket_client, carrier_client, service_settings)
        await worker.run(stop_event)

    logger.info("BOL worker shut down", app=app_settings.app_name)


def cli() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()
