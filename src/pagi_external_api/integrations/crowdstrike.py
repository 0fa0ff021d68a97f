"""Placeholder CrowdStrike client."""

from __future__ import annotations

import logging

from pagi_external_api.config import PAGIConfig
from pagi_external_api.errors import MissingCredentialError
from pagi_external_api.integrations.base import HostIsolator

logger = logging.getLogger(__name__)


class CrowdstrikeClient(HostIsolator):
    """CrowdStrike host isolation stub.

    Checks that a token is configured and otherwise does nothing.
    """

    def __init__(self, config: PAGIConfig) -> None:
        self.config = config.model_copy()

    def isolate_host(self, hostname: str) -> None:
        if not self.config.crowdstrike_api_token:
            raise MissingCredentialError("CROWDSTRIKE_API_TOKEN")

        logger.debug(
            "Simulated CrowdStrike host isolation",
            extra={"base_url": self.config.crowdstrike_base_url, "hostname": hostname},
        )
