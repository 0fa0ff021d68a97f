"""Placeholder Jira client."""

from __future__ import annotations

import logging

from pagi_external_api.config import PAGIConfig
from pagi_external_api.errors import MissingCredentialError
from pagi_external_api.integrations.base import IssueTracker

logger = logging.getLogger(__name__)


class JiraClient(IssueTracker):
    """Jira issue tracker stub.

    Checks that a token is configured and otherwise does nothing. No request is
    sent to `jira_base_url`.
    """

    def __init__(self, config: PAGIConfig) -> None:
        self.config = config.model_copy()

    def create_issue(self, summary: str) -> None:
        if not self.config.jira_api_token:
            raise MissingCredentialError("JIRA_API_TOKEN")

        logger.debug(
            "Simulated Jira issue creation",
            extra={"base_url": self.config.jira_base_url, "summary_length": len(summary)},
        )
