"""Pluggy hook specifications for recordcheck.

One setup-time hook lets plugins contribute named rules; one event hook
fires after each record is validated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from recordcheck.domain.registry import RuleFactory

hookspec = pluggy.HookspecMarker("recordcheck")
hookimpl = pluggy.HookimplMarker("recordcheck")


class RecordcheckHookSpec:
    """Hook specifications for the recordcheck plugin system."""

    @hookspec
    def register_rules(self) -> dict[str, RuleFactory] | None:
        """Return ``{rule_name: factory}`` for custom rules.

        Called once at startup, before schemas are compiled, so config
        files may reference the returned names.
        """

    @hookspec
    def post_validate(
        self,
        schema_name: str,
        ok: bool,
        error_count: int,
    ) -> None:
        """Called after each record is validated."""
