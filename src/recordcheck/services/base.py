"""BaseService: shared foundation for recordcheck services.

Every service receives the compiled :class:`SchemaCatalog` and, when
plugins are enabled, the :class:`PluginManager` whose hooks it notifies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from recordcheck.infrastructure.catalog import SchemaCatalog
    from recordcheck.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def validate_record(self, name: str, record: dict) -> ServiceResult:
                schema = self._catalog[name]
                ...
    """

    def __init__(self, catalog: SchemaCatalog, plugins: PluginManager | None = None) -> None:
        self._catalog = catalog
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call a plugin hook. No-op if no plugin manager is attached.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")
