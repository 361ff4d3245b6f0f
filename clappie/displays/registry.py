"""The table of views the display can show, by name."""

from __future__ import annotations

from clappie.displays.demos import HelloWorldScreen, PartiesStatusScreen
from clappie.displays.utility import (
    UtilityConfirmScreen,
    UtilityEditorScreen,
    UtilityListScreen,
    UtilityViewerScreen,
)
from clappie.engine.screen import ViewModule


def build_registry() -> dict[str, ViewModule]:
    """Return a fresh table of the built-in views."""
    return {
        "parties/status": ViewModule(PartiesStatusScreen, "centered", 70),
        "utility/list": ViewModule(UtilityListScreen, "centered", 50),
        "utility/confirm": ViewModule(UtilityConfirmScreen, "centered", 50),
        "utility/editor": ViewModule(UtilityEditorScreen, "full"),
        "utility/viewer": ViewModule(UtilityViewerScreen, "full"),
        "example-demo-screens/hello-world": ViewModule(HelloWorldScreen, "centered", 50),
    }


REGISTRY: dict[str, ViewModule] = build_registry()


def register(name: str, module: ViewModule) -> None:
    """Add or replace a view in the shared registry."""
    REGISTRY[name] = module


def list_registered() -> list[str]:
    """Return the registered view names in sorted order."""
    return sorted(REGISTRY)