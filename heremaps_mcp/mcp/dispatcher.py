"""Route tool calls to their translator and normalizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..core.here_client import HereMapsClient, OutboundRequest
from ..core.logging_config import get_logger
from ..core.types import ToolFailure, ToolInvocation, ToolOutcome
from . import normalizers, translators
from .schemas import ResultEnvelope

logger = get_logger(__name__)

Translator = Callable[[Mapping[str, Any], str], OutboundRequest]
Normalizer = Callable[[Any, Mapping[str, Any]], ToolOutcome]


@dataclass(frozen=True, slots=True)
class ToolRoute:
    """Translator/normalizer pair for one tool.

    With ``fetch`` unset the built URL itself is handed to the normalizer and
    no HTTP call is made.
    """

    translate: Translator
    normalize: Normalizer
    fetch: bool = True


ROUTES: dict[str, ToolRoute] = {
    "maps_geocode": ToolRoute(
        translators.geocode_request, normalizers.normalize_geocode
    ),
    "maps_reverse_geocode": ToolRoute(
        translators.reverse_geocode_request, normalizers.normalize_reverse_geocode
    ),
    "maps_directions": ToolRoute(
        translators.directions_request, normalizers.normalize_directions
    ),
    "maps_search_places": ToolRoute(
        translators.search_places_request, normalizers.normalize_search_places
    ),
    "maps_get_traffic_incidents": ToolRoute(
        translators.traffic_incidents_request, normalizers.normalize_traffic_incidents
    ),
    "maps_display": ToolRoute(
        translators.display_request, normalizers.normalize_display, fetch=False
    ),
}


class ToolDispatcher:
    """Execute map tools and wrap every outcome in a ResultEnvelope."""

    def __init__(self, api_key: str, client: HereMapsClient | None = None) -> None:
        self._api_key = api_key
        self._client = client or HereMapsClient()

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> ResultEnvelope:
        """Run tool ``name``; never raises."""

        route = ROUTES.get(name)
        if route is None:
            logger.warning("tool_call_unknown", name=name)
            return ResultEnvelope.from_text(f"Unknown tool: {name}", is_error=True)

        arguments = arguments or {}
        logger.debug("tool_call", name=name, arguments=arguments)
        try:
            outcome = await self._run(route, arguments)
        except Exception as exc:  # noqa: BLE001 - every failure becomes an error envelope
            logger.warning(
                "tool_call_failed",
                name=name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return ResultEnvelope.from_text(f"Error: {exc}", is_error=True)

        if isinstance(outcome, ToolFailure):
            logger.info("tool_call_soft_failure", name=name, message=outcome.message)
        return ResultEnvelope.from_outcome(outcome)

    async def dispatch_invocation(self, invocation: ToolInvocation) -> ResultEnvelope:
        return await self.dispatch(invocation.name, invocation.arguments)

    async def _run(self, route: ToolRoute, arguments: Mapping[str, Any]) -> ToolOutcome:
        request = route.translate(arguments, self._api_key)
        if not route.fetch:
            return route.normalize(request.full_url, arguments)

        payload = await self._client.get_json(request)
        return route.normalize(payload, arguments)
