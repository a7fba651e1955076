from __future__ import annotations

import asyncio

from campaignbot.capabilities.base import Collaborator, Encoder, Helper, Scanner, Weapon
from campaignbot.domain import CampaignReport, FatalNameError, FullName, parse_full_name, split_name
from campaignbot.logging_setup import get_logger

PLAN = "Take over the world!"


class Coordinator:
    """Runs a campaign through an optional assistant and caller-supplied capabilities.

    The assistant is exclusively owned. A failed consent check drops it for good;
    every operation that needs it silently does nothing once it is gone.
    """

    def __init__(
        self,
        first_name: str = "",
        last_name: str = "",
        *,
        assistant: Collaborator | None = None,
        shared_key: str = "",
        plan_delay_s: float = 0.1,
    ) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.assistant = assistant
        self.shared_key = shared_key
        self.plan_delay_s = plan_delay_s
        self._logger = get_logger(self.__class__.__name__)

    @classmethod
    def from_name(cls, name: str, *, shared_key: str = "", plan_delay_s: float = 0.1) -> Coordinator:
        """Build a coordinator from ``"First Last"``.

        Raises :class:`~campaignbot.domain.NameParseError` if the name has fewer
        than two space-separated components. The new coordinator has no assistant.
        """
        parsed = parse_full_name(name)
        return cls(parsed.first, parsed.last, shared_key=shared_key, plan_delay_s=plan_delay_s)

    # Identity -------------------------------------------------------------------
    @property
    def full_name(self) -> str:
        return str(FullName(first=self.first_name, last=self.last_name))

    def set_full_name(self, name: str) -> None:
        components = split_name(name)
        self._logger.debug("Received %d components.", len(components))
        if len(components) != 2:
            self._logger.error("Refusing malformed name %r", name)
            raise FatalNameError("Name must have first and last name")
        self.first_name, self.last_name = components

    # Workflow -------------------------------------------------------------------
    @property
    def has_assistant(self) -> bool:
        return self.assistant is not None

    def consent_check(self) -> None:
        if self.assistant is None:
            return
        if not self.assistant.reports_consent():
            self._logger.info("Assistant does not consent; dropping it.")
            self.assistant = None

    def delegate_discovery_and_build(self, helper: Helper, scanner: Scanner) -> list[str]:
        if self.assistant is None:
            return []
        targets = self.assistant.discover_targets(scanner)
        if targets:
            # First discovered target wins
            helper.build_at(targets[0])
        return targets

    def delegate_two_independent_actions(self, helper: Helper) -> None:
        helper.do_hard_work()
        helper.fight()

    def encode_and_deliver(self, secret: str, encoder: Encoder) -> str | None:
        if self.assistant is None:
            return None
        encoded = encoder.transform(secret, self.shared_key)
        self.assistant.deliver(encoded)
        return encoded

    def perform_attack(self, weapon: Weapon) -> None:
        weapon.fire()

    async def come_up_with_plan(self) -> str:
        await asyncio.sleep(self.plan_delay_s)
        return PLAN

    def run_campaign(
        self,
        helper: Helper,
        scanner: Scanner,
        encoder: Encoder,
        secret: str,
    ) -> CampaignReport:
        self.consent_check()
        self._logger.info("Consent checked: assistant %s", "retained" if self.has_assistant else "absent")

        self.delegate_two_independent_actions(helper)
        self._logger.info("Independent actions delegated.")

        targets = self.delegate_discovery_and_build(helper, scanner)
        headquarters = targets[0] if targets else None
        if headquarters is None:
            self._logger.info("No targets discovered; nothing built.")
        else:
            self._logger.info("Build delegated at %s (%d target(s) found)", headquarters, len(targets))

        delivered = self.encode_and_deliver(secret, encoder)
        if delivered is None:
            self._logger.info("No assistant to deliver the message to.")
        else:
            self._logger.info("Encoded message delivered.")

        return CampaignReport(
            coordinator=self.full_name,
            assistant_retained=self.has_assistant,
            targets=targets,
            headquarters=headquarters,
            delivered=delivered,
        )
