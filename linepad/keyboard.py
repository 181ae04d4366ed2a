"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The token as read from the terminal
    is_ctrl: bool = False


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Read the next key from the terminal and parse it."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies token (or a single raw character) into a KeyEvent."""
        key_str = str(key)

        # Named tokens like '<LEFT>', '<Ctrl-q>', '<BACKSPACE>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str in ('\x08', '\x7f'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if key_str in ('\n', '\r'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if key_str == '\t':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        lower = key_str[1:-1].lower().replace('+', '-')
        parts = lower.split('-')
        base = parts[-1]
        mods = set(parts[:-1])

        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if base == 'tab':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw='\t')
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')

        if 'ctrl' in mods and len(base) == 1:
            # Terminals send Ctrl-J / Ctrl-M for Enter
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if base == 'h':
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)

        # Unknown tokens are reported as special keys and ignored by the registry
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
