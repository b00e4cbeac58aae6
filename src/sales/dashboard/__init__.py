"""Dashboard controller factory.

Provides get_controller() / set_controller() so the API and tests share one
controller (and therefore one active window) per process.
"""

from sales.dashboard.controller import DashboardController

_current_controller: DashboardController | None = None


def get_controller() -> DashboardController:
    """Return the process-wide dashboard controller, creating it on first use."""
    global _current_controller
    if _current_controller is None:
        _current_controller = DashboardController()
    return _current_controller


def set_controller(controller: DashboardController) -> None:
    """Override the active controller (useful for tests)."""
    global _current_controller
    _current_controller = controller


def reset_controller() -> None:
    global _current_controller
    _current_controller = None
