"""Observability configuration using Logfire.

Services, use cases and stores log and open spans through ``logfire``
directly::

    import logfire

    logfire.info("Item added", list_id=list_id, item_id=item.id)

    with logfire.span("list_service.rate_item", list_id=list_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from topten.config import Settings

# Attribute names whose values are credentials
SCRUBBED_ATTRIBUTES = ["owner_secret", "user_token", "credential", "identity_token"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Data goes to Logfire cloud when ``OBSERVABILITY__SEND_TO_LOGFIRE`` says
    so, or by default when ``OBSERVABILITY__LOGFIRE_TOKEN`` is set; otherwise
    only to the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    config_kwargs: dict[str, Any] = {
        "service_name": "topten",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "scrubbing": logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        storage=settings.storage.backend,
        identity_mode=settings.identity.mode.value,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request with Logfire.

    Headers are never captured since they carry owner secrets and member
    tokens. Spans are tagged with the list being addressed.
    """

    def _list_attributes(request, attributes):
        path_params = getattr(request, "path_params", None) or {}
        if "list_id" in path_params:
            return {**attributes, "list_id": path_params["list_id"]}
        return attributes

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_list_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries against the kv_entries table."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
