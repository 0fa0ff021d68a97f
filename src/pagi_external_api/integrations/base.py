"""Capability interfaces for external security integrations.

Callers depend on these rather than on a concrete client, so a real
implementation can replace a placeholder without changing call sites.
"""

from abc import ABC, abstractmethod


class IssueTracker(ABC):
    """Creates issues in an issue-tracking system."""

    @abstractmethod
    def create_issue(self, summary: str) -> None:
        """Create an issue.

        Args:
            summary: One-line issue summary.

        Raises:
            MissingCredentialError: If the tracker's API token is not configured.
        """
        pass


class HostIsolator(ABC):
    """Network-isolates hosts through an endpoint-security service."""

    @abstractmethod
    def isolate_host(self, hostname: str) -> None:
        """Isolate a host.

        Args:
            hostname: Name of the host to contain.

        Raises:
            MissingCredentialError: If the service's API token is not configured.
        """
        pass
