import logging

from gamingservices.config import Settings, load_settings
from gamingservices.services import PayloadExtractor, get_default_extractor

logger = logging.getLogger(__name__)


def bootstrap(settings: Settings, extractor: PayloadExtractor | None = None) -> PayloadExtractor:
    extractor = extractor or get_default_extractor()
    if settings.startup_payload is None:
        logger.info("No startup payload configured")
        return extractor

    extractor.load_from_startup_string(settings.startup_payload)
    logger.info(
        "Cloud init finished request_id=%s payload_present=%s",
        extractor.get_request_id(),
        extractor.get_payload() is not None,
    )
    return extractor


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    bootstrap(settings)


if __name__ == "__main__":
    main()
