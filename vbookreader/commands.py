"""Command pattern implementation for reader key bindings."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType
from .navigation import Command

if TYPE_CHECKING:
    from .app import ReaderApp
    from .keyboard import KeyEvent


class ReaderCommand(ABC):
    """Base class for reader commands."""

    @abstractmethod
    def execute(self, app: 'ReaderApp', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            app: ReaderApp instance
            key_event: The key event that triggered this command
        """
        pass


class NavigationCommand(ReaderCommand):
    """Forwards a navigation ``Command`` to the reader state."""

    def __init__(self, command: Command):
        self.command = command

    def execute(self, app, key_event):
        app.state.dispatch(self.command)


class OpenFileCommand(ReaderCommand):
    def execute(self, app, key_event):
        app.start_open_prompt()


class HelpCommand(ReaderCommand):
    def execute(self, app, key_event):
        app.show_help()


class QuitCommand(ReaderCommand):
    def execute(self, app, key_event):
        app.running = False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], ReaderCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Navigation
        self.register((KeyType.REGULAR, ' '), NavigationCommand(Command.TOGGLE))
        self.register((KeyType.SPECIAL, 'up'), NavigationCommand(Command.MOVE_UP))
        self.register((KeyType.SPECIAL, 'down'), NavigationCommand(Command.MOVE_DOWN))

        # File
        self.register((KeyType.CTRL, 'o'), OpenFileCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.REGULAR, 'q'), QuitCommand())
        self.register((KeyType.SPECIAL, 'f1'), HelpCommand())
        self.register((KeyType.REGULAR, '?'), HelpCommand())

    def register(self, key: Tuple[KeyType, str], command: ReaderCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[ReaderCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, app: 'ReaderApp', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command was bound to the key
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        command.execute(app, key_event)
        return True
