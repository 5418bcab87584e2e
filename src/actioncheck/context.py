"""Context describing which action produced the result under test."""

from __future__ import annotations

from dataclasses import dataclass

from actioncheck.config import AssertionConfig


@dataclass(frozen=True)
class AssertionContext:
    """Read-only prefix prepended to every failure message.

    Attributes:
        prefix: Text identifying the test/action, e.g.
            "When calling Download action in FilesController expected".
    """

    prefix: str

    @classmethod
    def for_action(
        cls,
        action: str,
        controller: str,
        config: AssertionConfig | None = None,
    ) -> AssertionContext:
        """Build a context from the configured prefix template."""
        template = (config or AssertionConfig()).prefix_template
        return cls(prefix=template.format(action=action, controller=controller))
