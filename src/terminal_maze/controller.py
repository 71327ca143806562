"""Keyboard input for the engine."""

from collections import defaultdict

from pynput import keyboard
from pynput.keyboard import Key, KeyCode

from .movement import Intents

KEY_BINDINGS: dict[str, tuple[Key | KeyCode, ...]] = {
    "quit": (Key.esc,),
    "forward": (Key.up, KeyCode(char="w")),
    "backward": (Key.down, KeyCode(char="s")),
    "rotate_left": (Key.left, KeyCode(char="a")),
    "rotate_right": (Key.right, KeyCode(char="d")),
    "strafe_left": (KeyCode(char="q"),),
    "strafe_right": (KeyCode(char="e"),),
}


class Controller:
    """Tracks which keys are held and reports them as intents."""

    def __init__(self) -> None:
        self.pressed_keys = defaultdict(bool)
        self._listener: keyboard.Listener | None = None

    def on_press(self, key) -> None:
        self.pressed_keys[key] = True

    def on_release(self, key) -> None:
        self.pressed_keys[key] = False

    def start(self) -> None:
        """Start listening for key events on a background thread."""
        self._listener = keyboard.Listener(on_press=self.on_press, on_release=self.on_release)
        self._listener.start()

    def stop(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None

    def intents(self) -> Intents:
        """Snapshot of held keys as intents."""
        held = {
            intent: any(self.pressed_keys[key] for key in keys)
            for intent, keys in KEY_BINDINGS.items()
        }
        return Intents(**held)
