"""Launch the contact frontend: ``python -m frontend`` or ``contact-frontend``."""
import logging
import sys

from pydantic import ValidationError

log = logging.getLogger("frontend")


def main() -> None:
    import uvicorn

    from frontend.config import get_settings
    from frontend.main import create_app

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )
    try:
        settings = get_settings()
    except ValidationError as exc:
        log.critical(
            "FATAL: frontend configuration is invalid (is BACKEND_URL set?). The frontend proxy will not work. Exiting.\n%s",
            exc,
        )
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())
    log.info("Frontend application listening on port %s", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
