from .path_utils import resolve_absolute_path

__all__ = ["resolve_absolute_path"]
