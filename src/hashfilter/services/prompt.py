"""
Interactive handling of a duplicate for the "ask" policy.

The dialogue is a small state machine:
    AWAITING_CHOICE -> (delete | ignore) -> DONE
    AWAITING_CHOICE -> move -> AWAITING_MOVE_DESTINATION -> DONE
Any failure leaves the machine by raising, so every branch reports errors the same way.
"""
from enum import Enum
from typing import Callable, Optional

from hashfilter.core.errors import InputReadFailed, InvalidInput
from hashfilter.utils.path_utils import resolve_absolute_path

CHOICES = ("delete", "move", "ignore")


class PromptState(Enum):
    AWAITING_CHOICE = "awaiting-choice"
    AWAITING_MOVE_DESTINATION = "awaiting-move-destination"
    DONE = "done"


class AskPrompt:
    """
    Asks the operator what to do with one duplicate and performs the answer.

    Args:
        delete_action: called with the file path for "delete"
        move_action: called with the file path and an absolute destination folder for "move"
        input_func: returns one line of operator input (default: built-in input)
        output_func: prints a prompt line (default: built-in print)
    """

    def __init__(
        self,
        delete_action: Callable[[str], None],
        move_action: Callable[[str, str], None],
        input_func: Optional[Callable[[], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        self.delete_action = delete_action
        self.move_action = move_action
        self.input_func = input_func or input
        self.output_func = output_func or print

    def ask(self, path: str) -> None:
        state = PromptState.AWAITING_CHOICE
        while state is not PromptState.DONE:
            if state is PromptState.AWAITING_CHOICE:
                state = self._handle_choice(path)
            elif state is PromptState.AWAITING_MOVE_DESTINATION:
                state = self._handle_move_destination(path)

    def _handle_choice(self, path: str) -> PromptState:
        self.output_func(f"File {path} is repeated, what to do with it? ({'/'.join(CHOICES)})")
        choice = self._read_line()

        if choice == "delete":
            self.delete_action(path)
            return PromptState.DONE
        if choice == "move":
            return PromptState.AWAITING_MOVE_DESTINATION
        if choice == "ignore":
            return PromptState.DONE
        raise InvalidInput(f"Wrong input: '{choice}' (expected one of: {', '.join(CHOICES)})", path=path)

    def _handle_move_destination(self, path: str) -> PromptState:
        self.output_func("Enter destination folder:")
        folder = resolve_absolute_path(self._read_line())
        self.move_action(path, folder)
        return PromptState.DONE

    def _read_line(self) -> str:
        try:
            line = self.input_func()
        except (EOFError, OSError, UnicodeDecodeError) as e:
            raise InputReadFailed() from e
        return line.strip()
