"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/conflict_resolver.py
Applies the active policy to a duplicate file.
Delete and move are implemented once and shared by the direct policies and the ask dialogue.
"""
import logging
from typing import Callable, Optional

from hashfilter.core.interfaces import ConflictResolver
from hashfilter.core.models import ConflictAction, Policy
from hashfilter.services.file_service import FileService
from hashfilter.services.prompt import AskPrompt

logger = logging.getLogger(__name__)


class ConflictResolverImpl(ConflictResolver):
    """
    Dispatches a duplicate to delete / move / inform / ask according to `policy`.
    Confirmations go through output_func; failures raise and end the run.
    """

    def __init__(
        self,
        policy: Policy,
        input_func: Optional[Callable[[], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        prompt: Optional[AskPrompt] = None
    ):
        self.policy = policy
        self.output_func = output_func or print
        self.prompt = prompt or AskPrompt(
            delete_action=self.delete_duplicate,
            move_action=self.move_duplicate,
            input_func=input_func,
            output_func=output_func,
        )

    def resolve(self, path: str, digest: bytes) -> None:
        action = self.policy.action
        logger.debug(f"Resolving {path} with policy '{action.value}'")

        if action is ConflictAction.DELETE:
            self.delete_duplicate(path)
        elif action is ConflictAction.INFORM:
            self.output_func(f"File {path} is repeated, hash: {digest.hex()}")
        elif action is ConflictAction.MOVE:
            self.move_duplicate(path, self.policy.destination)
        elif action is ConflictAction.ASK:
            self.prompt.ask(path)
        else:
            raise ValueError(f"Unsupported conflict action: {action!r}")

    def delete_duplicate(self, path: str) -> None:
        if self.policy.trash:
            FileService.move_to_trash(path)
            self.output_func(f"File {path} moved to trash")
        else:
            FileService.delete_file(path)
            self.output_func(f"File {path} deleted")

    def move_duplicate(self, path: str, folder: str) -> None:
        destination = FileService.move_file(path, folder)
        self.output_func(f"File {path} moved to {destination}")
