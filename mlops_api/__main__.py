"""Run the API with uvicorn.

Usage:
    python -m mlops_api
    PORT=8080 python -m mlops_api
"""
import logging

import uvicorn

from mlops_api.config import get_settings
from mlops_api.main import app

logger = logging.getLogger("mlops_api.server")


class Server(uvicorn.Server):
    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        logger.info("listening on port %s", self.bound_port())

    def bound_port(self) -> int:
        for server in self.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port


def main() -> None:
    settings = get_settings()
    # serve the module-level app so a process holds exactly one store
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()
