"""Dialog service interface - keeps message boxes out of the view-model."""

import abc
from typing import Optional, Sequence, Tuple

FileTypes = Sequence[Tuple[str, str]]

PDF_FILE_TYPES: FileTypes = (
    ("Pliki Dokumentów (*.pdf)", "*.pdf"),
    ("Wszystkie Pliki (*.*)", "*.*"),
)


class AbstractDialogService(abc.ABC):

    @abc.abstractmethod
    def confirm(self, message: str, title: str) -> bool:
        """Ask a yes/no question with a warning icon; True means yes."""
        raise NotImplementedError

    @abc.abstractmethod
    def inform(self, message: str, title: str) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def ask_save_path(self, default_filename: str, initial_dir: str,
                      file_types: FileTypes = PDF_FILE_TYPES) -> Optional[str]:
        """Let the user pick a target file; None when the dialog is cancelled."""
        raise NotImplementedError
