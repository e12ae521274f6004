"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery from ``.recordcheck/plugins/``.
Capabilities: custom rules, post-validate notifications.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

import pluggy

from recordcheck.plugins.hookspecs import RecordcheckHookSpec

PROJECT_NAME = "recordcheck"
ENTRY_POINT_GROUP = "recordcheck.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RecordcheckHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Uses pluggy's setuptools entry point discovery for the
        ``recordcheck.plugins`` group, then scans *local_dir* for
        single-file Python plugins, then registers every plugin-provided
        rule.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        for plugin in self._pm.get_plugins():
            self._register_plugin_rules(plugin, self._plugin_name(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._register_plugin_rules(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._plugin_name(p) for p in self._pm.get_plugins()]

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module. Classes inside the module that carry hookimpl-decorated
        methods are instantiated and registered.

        Errors are logged as warnings but never raised.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"recordcheck_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name:
                    continue
                if not self._has_hook_impls(obj):
                    continue
                try:
                    self._pm.register(obj(), name=f"{module_name}.{obj.__name__}")
                    logger.debug("Loaded local plugin %s from %s", obj.__name__, py_file)
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly; hook
        dispatch against a class leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _register_plugin_rules(plugin: object, plugin_name: str) -> None:
        """Register rules exposed by a single plugin instance."""
        from recordcheck.domain.registry import register_rule

        hook = getattr(plugin, "register_rules", None)
        if hook is None:
            return

        try:
            rule_map = hook()
        except Exception:
            logger.warning("Failed to collect rules from plugin %s", plugin_name, exc_info=True)
            return

        if rule_map is None:
            return
        if not isinstance(rule_map, dict):
            logger.warning("Plugin %s returned non-dict rule registrations", plugin_name)
            return

        for rule_name, factory in rule_map.items():
            try:
                register_rule(rule_name, factory)
                logger.debug("Registered rule %s from plugin %s", rule_name, plugin_name)
            except (TypeError, ValueError):
                logger.warning(
                    "Plugin %s could not register rule %s",
                    plugin_name,
                    rule_name,
                    exc_info=True,
                )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* defines at least one recordcheck hookimpl."""
        marker = f"{PROJECT_NAME}_impl"
        return any(
            hasattr(getattr(cls, attr, None), marker)
            for attr in dir(cls)
            if not attr.startswith("_")
        )
