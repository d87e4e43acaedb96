from .conflict_resolver import ConflictResolverImpl
from .file_service import FileService
from .prompt import AskPrompt, PromptState

__all__ = ["ConflictResolverImpl", "FileService", "AskPrompt", "PromptState"]
