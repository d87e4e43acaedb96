"""
Unified command orchestrator for a filtering run.
This is the SINGLE source of truth for wiring the engine, used by the CLI and by library callers.
"""
from typing import Callable, Optional
from hashfilter.core.classifier import FileClassifier
from hashfilter.core.models import FilterParams, RunStats
from hashfilter.core.registry import SortedHashRegistry
from hashfilter.core.scanner import FolderScannerImpl
from hashfilter.services.conflict_resolver import ConflictResolverImpl


class FilterCommand:
    """
    Builds scanner, resolver and classifier from FilterParams and runs them.

    Usage:
        params = FilterParams(folder="/abs/path", policy=Policy.move("/abs/holding"))
        stats = FilterCommand().execute(params)

        # Scripted operator for the ask policy:
        answers = iter(["ignore", "delete"])
        stats = FilterCommand(input_func=lambda: next(answers)).execute(params)
    """

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        self.input_func = input_func
        self.output_func = output_func
        self._registry: Optional[SortedHashRegistry] = None

    def execute(self, params: FilterParams) -> RunStats:
        """
        Execute one run with the given parameters.

        Returns:
            RunStats of the completed run

        Raises:
            HashFilterError: the first fatal error; remaining files are not processed
        """
        self._registry = SortedHashRegistry()
        classifier = FileClassifier(
            scanner=FolderScannerImpl(params.folder),
            resolver=ConflictResolverImpl(
                params.policy,
                input_func=self.input_func,
                output_func=self.output_func,
            ),
            registry=self._registry,
        )
        return classifier.run()

    @property
    def registry(self) -> Optional[SortedHashRegistry]:
        """Registry of the last run (None before the first execute)."""
        return self._registry
