"""Loading overlay shown on first visit and replayed on every navigation."""

from dataclasses import dataclass
from enum import StrEnum

from .timers import Scheduler, TimerGroup

SESSION_KEY = "has_seen_loader"

FADE_AFTER = 1.5
HIDE_AFTER = 2.0

DEFAULT_EXEMPT_PREFIX = "/studio/"


class SessionLoaderState:
    """Reads and writes the "loader already shown" flag in a session mapping."""

    def __init__(self, session) -> None:
        self.session = session

    def has_seen(self) -> bool:
        return bool(self.session.get(SESSION_KEY, False))

    def mark_seen(self) -> None:
        self.session[SESSION_KEY] = True


class OverlayPhase(StrEnum):
    PENDING = "pending"
    VISIBLE = "visible"
    FADING = "fading"
    HIDDEN = "hidden"


class OverlayMode(StrEnum):
    NONE = "none"
    INITIAL = "initial"
    TRANSITION = "transition"


@dataclass(frozen=True)
class OverlayPlan:
    mode: OverlayMode
    fade_after_ms: int = int(FADE_AFTER * 1000)
    hide_after_ms: int = int(HIDE_AFTER * 1000)

    @property
    def is_shown(self) -> bool:
        return self.mode != OverlayMode.NONE


class LoadingOverlay:
    """Phase tracking for the branded loading overlay.

    Until ``mount`` runs the overlay is PENDING and renders a neutral
    placeholder. The session flag only decides whether the initial show runs;
    navigations after the initial load always replay the full timing.
    """

    def __init__(
        self,
        session_state: SessionLoaderState,
        *,
        scheduler: Scheduler | None = None,
        exempt_prefix: str = DEFAULT_EXEMPT_PREFIX,
    ) -> None:
        self.session_state = session_state
        self.exempt_prefix = exempt_prefix
        self.phase = OverlayPhase.PENDING
        self.initial_load_completed = False
        self._timers = TimerGroup(scheduler)

    def is_exempt(self, path: str) -> bool:
        return bool(self.exempt_prefix) and path.startswith(self.exempt_prefix)

    def plan(self, path: str) -> OverlayPlan:
        """Describe what a full page load of *path* shows, without touching state."""
        if self.is_exempt(path):
            return OverlayPlan(OverlayMode.NONE)
        if self.session_state.has_seen():
            return OverlayPlan(OverlayMode.TRANSITION)
        return OverlayPlan(OverlayMode.INITIAL)

    def mount(self, path: str) -> None:
        if self.is_exempt(path) or self.session_state.has_seen():
            self.phase = OverlayPhase.HIDDEN
            self.initial_load_completed = True
            return
        self._play(on_complete=self._complete_initial)

    def navigate(self, path: str) -> None:
        if not self.initial_load_completed or self.is_exempt(path):
            return
        self._play()

    def teardown(self) -> None:
        self._timers.cancel_all()

    @property
    def is_rendered(self) -> bool:
        return self.phase != OverlayPhase.HIDDEN

    def _play(self, on_complete=None) -> None:
        self._timers.cancel_all()
        self.phase = OverlayPhase.VISIBLE

        def fade() -> None:
            self.phase = OverlayPhase.FADING

        def hide() -> None:
            self.phase = OverlayPhase.HIDDEN
            if on_complete is not None:
                on_complete()

        self._timers.schedule(FADE_AFTER, fade)
        self._timers.schedule(HIDE_AFTER, hide)

    def _complete_initial(self) -> None:
        self.initial_load_completed = True
        self.session_state.mark_seen()
