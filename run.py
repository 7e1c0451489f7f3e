"""Entry point for the quiz and question services.

By default both services are started concurrently in one process, each
on its own uvicorn server.  Pass ``--service quiz`` or
``--service question`` to run only one of them, which is how the
services are deployed separately.

Hosts, ports, store backend and database files are read from the
environment (see ``quiz_platform.app.core.config``).

Usage:
    python run.py
    python run.py --service question
"""
import argparse
import asyncio
import logging
from typing import List

from uvicorn import Config, Server

from quiz_platform.app.core.config import settings
from quiz_platform.app.core.logging_config import resolve_log_level
from quiz_platform.app.main import create_question_app, create_quiz_app

logger = logging.getLogger(__name__)


def build_servers(service: str) -> List[Server]:
    """Create a uvicorn server for each requested service."""
    log_level = resolve_log_level(settings.log_level).lower()
    servers = []
    if service in {"quiz", "all"}:
        config = Config(
            app=create_quiz_app(),
            host=settings.quiz_service_host,
            port=settings.quiz_service_port,
            log_level=log_level,
        )
        servers.append(Server(config))
    if service in {"question", "all"}:
        config = Config(
            app=create_question_app(),
            host=settings.question_service_host,
            port=settings.question_service_port,
            log_level=log_level,
        )
        servers.append(Server(config))
    return servers


async def main(service: str) -> None:
    """Serve the requested services until one of them stops."""
    tasks = [asyncio.create_task(server.serve()) for server in build_servers(service)]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logger.error("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the quiz platform services.")
    parser.add_argument(
        "--service",
        choices=["quiz", "question", "all"],
        default="all",
        help="Which service to start (default: both).",
    )
    args = parser.parse_args()
    try:
        asyncio.run(main(args.service))
    except (KeyboardInterrupt, SystemExit):
        pass
