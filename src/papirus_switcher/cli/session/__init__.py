"""The interactive picker session: controller and frame composition."""

from papirus_switcher.cli.session.picker import (
    Outcome,
    Phase,
    PickerApp,
    SessionResult,
    run_picker,
)
from papirus_switcher.cli.session.renderer import Renderer

__all__ = ["Outcome", "Phase", "PickerApp", "SessionResult", "run_picker", "Renderer"]
