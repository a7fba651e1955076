from __future__ import annotations

from typing import Protocol


class Encoder(Protocol):
    """Turns a plaintext secret into an encoded string using a shared key."""

    def transform(self, secret: str, key: str) -> str:  # pragma: no cover - protocol
        ...


class Weapon(Protocol):
    def fire(self) -> None:  # pragma: no cover - protocol
        ...


class Helper(Protocol):
    """Worker the coordinator delegates construction and grunt work to."""

    def build_at(self, location: str) -> None:  # pragma: no cover - protocol
        ...

    def do_hard_work(self) -> None:  # pragma: no cover - protocol
        ...

    def fight(self) -> None:  # pragma: no cover - protocol
        ...


class Scanner(Protocol):
    """Handed to an assistant so it can look for targets."""

    def activate(self) -> None:  # pragma: no cover - protocol
        ...


class Collaborator(Protocol):
    """What a coordinator needs from the assistant it owns."""

    def reports_consent(self) -> bool:  # pragma: no cover - protocol
        ...

    def discover_targets(self, scanner: Scanner) -> list[str]:  # pragma: no cover - protocol
        ...

    def deliver(self, message: str) -> None:  # pragma: no cover - protocol
        ...
