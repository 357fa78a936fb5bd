"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Answer accepted", answer_id=str(answer.id))

    # Manual spans around service operations
    with logfire.span("reaction_service.set_reaction", content_id=str(content_id)):
        ...

Search degradation (indexed backend -> relational fallback) is reported with
logfire.debug so it only shows up when debug verbosity is enabled.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ask.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is decided by, in priority order: the explicit
    OBSERVABILITY__SEND_TO_LOGFIRE flag, then presence of a token.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "ask-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        search_configured=settings.search.url is not None,
        cache_enabled=settings.cache.enabled,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Add method, path and client host to request spans."""
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Traces every statement, including the fallback full-text matcher and the
    acceptance row lock.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument httpx with Logfire.

    Covers calls to the indexed search service.
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")


def instrument_redis() -> None:
    """Instrument redis with Logfire.

    Covers the tagged cache store round-trips.
    """
    logfire.instrument_redis()
    logfire.info("redis instrumented")
