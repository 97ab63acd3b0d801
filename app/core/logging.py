import logging


class CredentialFilter(logging.Filter):
    """Mask credentials passed as structured log fields."""

    BLOCKED_KEYS = {"password", "ftp_password"}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.BLOCKED_KEYS:
            if hasattr(record, key):
                setattr(record, key, "[REDACTED]")
        return True


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # Logger-level filters skip records propagated from child loggers.
    for handler in logging.getLogger().handlers:
        if not any(isinstance(existing, CredentialFilter) for existing in handler.filters):
            handler.addFilter(CredentialFilter())
