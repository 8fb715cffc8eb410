"""Data types for the license catalog."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LicenseRecord:
    """One bundled license: front-matter metadata plus the license text."""

    title: str
    identifier: str     # spdx-id
    body: str
    description: str = ""
    how: str = ""
    using: dict = field(default_factory=dict)
    permissions: tuple = ()
    conditions: tuple = ()
    limitations: tuple = ()
    featured: bool = False
    nickname: str | None = None

    def matches(self, name: str) -> bool:
        """Exact, case-sensitive match on title or identifier."""
        return self.title == name or self.identifier == name
