"""Launch the contact backend: ``python -m backend`` or ``contact-backend``."""
import logging
import sys

from pydantic import ValidationError

log = logging.getLogger("backend")


def main() -> None:
    import uvicorn

    from backend.core.config import get_settings
    from backend.main import create_app

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )
    try:
        settings = get_settings()
    except ValidationError as exc:
        log.critical("FATAL: backend configuration is invalid (is MONGO_URI set?). Backend will not start.\n%s", exc)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level.upper())
    log.info("Starting backend on %s:%s", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
