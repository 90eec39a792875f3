import logging

import uvicorn

from faleproxy import config as env
from faleproxy.api.app import create_app
from faleproxy.container import Container

logger = logging.getLogger(__name__)


def main(container: Container = None):
    logging.basicConfig(
        level=env.log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    container = container or Container()
    app = create_app(container)

    host = container.config.HOST()
    port = int(container.config.PORT())
    logger.info("Faleproxy server listening on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == '__main__':
    main()
