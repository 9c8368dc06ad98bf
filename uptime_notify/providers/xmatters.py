"""xMatters notification provider (https://www.xmatters.com)."""

import logging
from typing import Awaitable, Callable, Optional, Union

import httpx

from uptime_notify.config import get_setting
from uptime_notify.errors import NotificationError
from uptime_notify.events import AlertEvent, classify_event, resolve_address
from uptime_notify.models import monitor_relative_url
from uptime_notify.providers.base import NotificationProvider
from uptime_notify.providers.credentials import credentials_from_config
from uptime_notify.schemas.notification import XMattersConfig
from uptime_notify.transport import OutboundRequest, check_result, http_client, send_request

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Sent Successfully."
DEFAULT_PRIORITY = "medium"
CLIENT_NAME = "Uptime Kuma"


class XMattersProvider(NotificationProvider):
    """Trigger xMatters alerts through an HTTP trigger endpoint."""

    @property
    def provider_type(self) -> str:
        return "xmatters"

    def __init__(
        self,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
        setting_lookup: Optional[Callable[[str], Awaitable[Optional[str]]]] = None,
    ):
        self.client_factory = client_factory or http_client
        self.setting_lookup = setting_lookup or get_setting

    async def send(
        self,
        config: Union[dict, XMattersConfig],
        message: str,
        monitor: Optional[dict] = None,
        heartbeat: Optional[dict] = None,
    ) -> Optional[str]:
        if not isinstance(config, XMattersConfig):
            config = XMattersConfig.model_validate(config)

        event = classify_event(monitor, heartbeat)
        if event is None:
            return None

        try:
            async with self.client_factory() as client:
                return await self.post_notification(client, config, event, message)
        except NotificationError as exc:
            logger.warning("xMatters notification to %s failed: %s", config.url, exc)
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("xMatters notification to %s failed: %s", config.url, exc)
            self.raise_transport_error(exc)

    async def post_notification(
        self,
        client: httpx.AsyncClient,
        config: XMattersConfig,
        event: AlertEvent,
        message: str,
    ) -> str:
        """Build, authenticate and send the alert, then classify the response."""
        target = event.target

        request = OutboundRequest(
            method="POST",
            url=config.url,
            headers={"Content-Type": "application/json"},
            json={
                "title": event.title,
                "message": message,
                "status": event.status,
                "priority": config.priority or DEFAULT_PRIORITY,
                "source": resolve_address(target),
                "floodControlId": target.id,
            },
        )

        credentials = credentials_from_config(config)
        if credentials is not None:
            await credentials.apply(request, client)

        # Deep link back into the monitoring UI; id-less targets (the test placeholder) get none
        base_url = await self.setting_lookup("primaryBaseURL")
        if base_url and target.id is not None:
            request.json["client"] = CLIENT_NAME
            request.json["client_url"] = base_url + monitor_relative_url(target.id)

        resp = await send_request(client, request)
        check_result(resp, "xMatters notification")

        logger.info(
            "xMatters notification sent: title=%s status=%s", event.title, resp.status_code
        )
        if resp.reason_phrase:
            return f"xMatters notification succeed: {resp.reason_phrase}"
        return SUCCESS_MESSAGE
