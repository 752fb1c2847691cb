"""Window and rendering-context settings and their state objects."""

from __future__ import annotations

from dataclasses import dataclass, replace

OPENGL_CORE_PROFILE = 1
OPENGL_COMPATIBILITY = 0


@dataclass
class WindowSettings:
    """Creation parameters of a window."""

    share: Window | None = None
    title: str = ""
    style: int = 0
    ex_style: int = 0
    width: int = 0
    height: int = 0
    offset_x: int = 0
    offset_y: int = 0
    focused: bool = False
    visible: bool = False
    fullscreen: bool = False
    dummy: bool = False


@dataclass
class ContextSettings:
    """Requested rendering-context profile and version."""

    profile: int = 0
    major: int = 0
    minor: int = 0
    dummy: bool = False
    forward: bool = False


def default_window_settings() -> WindowSettings:
    """Fresh copy of the engine's default window hints."""
    return WindowSettings(
        share=None,
        title="WINDOW_NAME",
        style=0,
        ex_style=0,
        width=1024,
        height=768,
        offset_x=0,
        offset_y=0,
        focused=True,
        visible=True,
        fullscreen=False,
        dummy=False,
    )


def default_context_settings() -> ContextSettings:
    """Fresh copy of the engine's default context hints."""
    return ContextSettings(
        profile=OPENGL_CORE_PROFILE, major=3, minor=3, dummy=False, forward=False
    )


class Context:
    """Rendering context owned by a window."""

    def __init__(self, parent: Window, settings: ContextSettings) -> None:
        self.settings = replace(settings)
        self.parent = parent
        self.alive = True
        parent.context = self

    @property
    def profile(self) -> int:
        return self.settings.profile

    @property
    def major_version(self) -> int:
        return self.settings.major

    @property
    def minor_version(self) -> int:
        return self.settings.minor

    @property
    def is_dummy(self) -> bool:
        return self.settings.dummy

    @property
    def use_forward_rendering(self) -> bool:
        return self.settings.forward

    def destroy(self) -> None:
        """Release the context."""
        self.alive = False


class Window:
    """Window state: its settings, running flag and rendering context."""

    def __init__(
        self,
        settings: WindowSettings,
        context_settings: ContextSettings | None = None,
    ) -> None:
        base = context_settings if context_settings is not None else default_context_settings()
        self._setup(settings, replace(base, dummy=settings.dummy))

    def _setup(self, settings: WindowSettings, context_settings: ContextSettings) -> None:
        self.settings = replace(settings)
        self.old_settings = replace(settings)
        self.running = True
        self.context: Context | None = Context(self, context_settings)

    @classmethod
    def dummy(cls) -> Window:
        """A throwaway window with a bare dummy context."""
        window = cls.__new__(cls)
        window._setup(WindowSettings(), ContextSettings(0, 0, 0, True, False))
        return window

    @property
    def width(self) -> int:
        return self.settings.width

    @width.setter
    def width(self, value: int) -> None:
        self.settings.width = value

    @property
    def height(self) -> int:
        return self.settings.height

    @height.setter
    def height(self, value: int) -> None:
        self.settings.height = value

    @property
    def offset_x(self) -> int:
        return self.settings.offset_x

    @offset_x.setter
    def offset_x(self, value: int) -> None:
        self.settings.offset_x = value

    @property
    def offset_y(self) -> int:
        return self.settings.offset_y

    @offset_y.setter
    def offset_y(self, value: int) -> None:
        self.settings.offset_y = value

    @property
    def title(self) -> str:
        return self.settings.title

    @title.setter
    def title(self, value: str) -> None:
        self.settings.title = value

    @property
    def focused(self) -> bool:
        return self.settings.focused

    @focused.setter
    def focused(self, value: bool) -> None:
        self.settings.focused = value

    @property
    def visible(self) -> bool:
        return self.settings.visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self.settings.visible = value

    @property
    def fullscreen(self) -> bool:
        return self.settings.fullscreen

    def set_fullscreen(self) -> None:
        """Switch to fullscreen, remembering the windowed settings."""
        if self.settings.fullscreen:
            return
        self.old_settings = replace(self.settings)
        self.settings.fullscreen = True

    def set_windowed(self) -> None:
        """Leave fullscreen, restoring the remembered settings."""
        if not self.settings.fullscreen:
            return
        self.settings = replace(self.old_settings)
        self.settings.fullscreen = False

    def destroy(self) -> None:
        """Stop the window and release its context."""
        self.running = False
        if self.context is not None:
            self.context.destroy()
        self.context = None