"""Run the API with uvicorn: `python -m portfolio_api` or `portfolio-api`."""

import uvicorn

from portfolio_api.config import settings


def main() -> None:
    uvicorn.run(
        "portfolio_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
