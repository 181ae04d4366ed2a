"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._move(editor)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor'):
        """Perform the movement."""
        pass


class LeftCommand(MovementCommand):
    def _move(self, editor):
        editor.state.move_left()


class RightCommand(MovementCommand):
    def _move(self, editor):
        editor.state.move_right()


class UpCommand(MovementCommand):
    def _move(self, editor):
        editor.state.move_up()


class DownCommand(MovementCommand):
    def _move(self, editor):
        editor.state.move_down()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the document."""
        self._edit(editor, key_event)
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        # Backspace at column 0 changes nothing
        if editor.state.cursor.column == 0:
            return False
        return super().execute(editor, key_event)

    def _edit(self, editor, key_event):
        editor.state.delete_before_cursor()


class SplitLineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.state.split_line_at_cursor()


class InsertCharCommand(EditCommand):
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        char = key_event.value
        # Filter out control characters and multi-character tokens
        if len(char) != 1 or ord(char) < 32 or ord(char) == 127:
            return False
        return super().execute(editor, key_event)

    def _edit(self, editor, key_event):
        editor.state.insert_char(key_event.value)


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify document content directly."""
        self._execute_system(editor)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor'):
        """Perform the system action."""
        pass


class QuitCommand(SystemCommand):
    def _execute_system(self, editor):
        editor.running = False


class SaveCommand(SystemCommand):
    def _execute_system(self, editor):
        editor.handle_save()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_command = InsertCharCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCommand())
        self.register((KeyType.SPECIAL, 'up'), UpCommand())
        self.register((KeyType.SPECIAL, 'down'), DownCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), SplitLineCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        # Handle regular text input
        if key_event.key_type == KeyType.REGULAR:
            return self._insert_command.execute(editor, key_event)

        return False
