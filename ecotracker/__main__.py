import logging

import uvicorn

from .settings import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("ecotracker.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
