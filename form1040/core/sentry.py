"""Sentry error tracking integration."""

import sentry_sdk

from form1040.core.config import settings


def init_sentry() -> bool:
    """Initialize Sentry error tracking if DSN is configured.

    Extraction failures are the only errors the processing layer reports.
    PII is never sent: raw fields carry SSNs and names.

    Returns:
        True when Sentry was initialized, False when no DSN is configured.
    """
    if not settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1,
        send_default_pii=False,
    )
    return True


def capture_processing_exception(exc: BaseException, **tags: str) -> None:
    """Report a document processing failure with searchable tags."""
    with sentry_sdk.new_scope() as scope:
        for key, value in tags.items():
            scope.set_tag(key, value)
        sentry_sdk.capture_exception(exc)
