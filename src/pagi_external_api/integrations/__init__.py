"""Placeholder clients for the issue-tracker and host-isolation services."""

from pagi_external_api.integrations.base import HostIsolator, IssueTracker
from pagi_external_api.integrations.crowdstrike import CrowdstrikeClient
from pagi_external_api.integrations.jira import JiraClient

__all__ = [
    "CrowdstrikeClient",
    "HostIsolator",
    "IssueTracker",
    "JiraClient",
]
