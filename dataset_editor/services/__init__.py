from .editor_service import DatasetEditor

__all__ = ["DatasetEditor"]
