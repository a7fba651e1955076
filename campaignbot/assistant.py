from __future__ import annotations

from collections.abc import Iterable

from campaignbot.capabilities.base import Scanner
from campaignbot.logging_setup import get_logger


class Assistant:
    """Collaborator owned by a coordinator.

    It answers whether it goes along with the campaign, reports the targets it
    knows about and receives messages that were already encoded by its owner.
    """

    def __init__(
        self,
        scanner: Scanner | None = None,
        *,
        consents: bool = True,
        known_targets: Iterable[str] = (),
    ) -> None:
        self.scanner = scanner
        self.consents = consents
        self.known_targets: list[str] = list(known_targets)
        self.inbox: list[str] = []
        self._logger = get_logger(self.__class__.__name__)

    def reports_consent(self) -> bool:
        return self.consents

    def discover_targets(self, scanner: Scanner) -> list[str]:
        self._logger.debug("Discovering targets with %s", type(scanner).__name__)
        return list(self.known_targets)

    def deliver(self, message: str) -> None:
        self.inbox.append(message)
