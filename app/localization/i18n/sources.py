"""Translation source readers.

A source reader supplies the raw structured text for one language code and
does nothing else: parsing belongs to ``PackParser``. Readers are
side-effect free per call and safe to call from several threads.
"""

from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from localization.i18n.exceptions import MalformedSourceError, SourceNotFoundError
from localization.logging import get_module_logger

logger = get_module_logger()

DEFAULT_MANIFEST_NAME = "languages.json"


def _read_utf8(resource, code: str, location: str) -> str:
    """Read ``resource`` as UTF-8, raising only I18nError subclasses.

    Args:
        resource: A ``pathlib.Path`` or ``importlib.resources`` traversable.
        code: Language code (or "manifest") the document belongs to.
        location: Human-readable location used in SourceNotFoundError.
    """
    try:
        return resource.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedSourceError(code, "", f"invalid utf-8: {e.reason}") from e
    except OSError as e:
        raise SourceNotFoundError(code, location) from e


class SourceReader(ABC):
    """Abstract base for translation source readers."""

    @abstractmethod
    def read(self, code: str) -> str:
        """Return the raw pack document for a language.

        Args:
            code: Language code (e.g. "en").

        Returns:
            Raw structured text of the pack document.

        Raises:
            SourceNotFoundError: If no document exists for ``code``.
        """
        pass

    def read_manifest(self) -> Optional[str]:
        """Return the raw manifest document, or None if the source has none."""
        return None

    def available_codes(self) -> List[str]:
        """Return the language codes this source can supply, if it can tell."""
        return []


class DirectorySourceReader(SourceReader):
    """Reads ``<directory>/<code><extension>`` documents from the filesystem.

    Attributes:
        directory: Directory containing one document per language.
        extension: File extension including the dot (e.g. ".json").
        manifest_name: File name of the manifest inside ``directory``.
    """

    def __init__(
        self,
        directory: Path,
        extension: str = ".json",
        manifest_name: str = DEFAULT_MANIFEST_NAME,
    ):
        """Initialize directory reader.

        Args:
            directory: Path to the directory holding pack documents.
            extension: File extension of pack documents.
            manifest_name: Manifest file name inside the directory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.directory = Path(directory)
        self.extension = extension
        self.manifest_name = manifest_name

        if not self.directory.is_dir():
            raise ValueError(f"Translations directory not found: {self.directory}")

        logger.info(
            "initialized_directory_source",
            directory=str(self.directory),
            extension=extension,
        )

    def _path_for(self, code: str) -> Path:
        return self.directory / f"{code}{self.extension}"

    def read(self, code: str) -> str:
        path = self._path_for(code)
        # Reject codes that would escape the directory (e.g. "../secrets").
        if path.parent.resolve() != self.directory.resolve():
            raise SourceNotFoundError(code, str(path))
        return _read_utf8(path, code, str(path))

    def read_manifest(self) -> Optional[str]:
        path = self.directory / self.manifest_name
        if not path.is_file():
            return None
        return _read_utf8(path, "manifest", str(path))

    def available_codes(self) -> List[str]:
        manifest = self.directory / self.manifest_name
        return sorted(
            p.name[: -len(self.extension)]
            for p in self.directory.glob(f"*{self.extension}")
            if p.is_file() and p != manifest
        )


class PackageResourceSourceReader(SourceReader):
    """Reads pack documents embedded as package data.

    Documents live at ``<package>/<subdirectory>/<code><extension>`` and are
    accessed through ``importlib.resources``, so packs shipped inside a
    wheel or zip archive work the same as on disk.
    """

    def __init__(
        self,
        package: str,
        subdirectory: str = "locales",
        extension: str = ".json",
        manifest_name: str = DEFAULT_MANIFEST_NAME,
    ):
        self.package = package
        self.subdirectory = subdirectory
        self.extension = extension
        self.manifest_name = manifest_name

    def _root(self):
        root = resources.files(self.package)
        return root.joinpath(self.subdirectory) if self.subdirectory else root

    def read(self, code: str) -> str:
        if "/" in code or "\\" in code:
            raise SourceNotFoundError(code)
        location = f"{self.package}:{self.subdirectory}"
        resource = self._root().joinpath(f"{code}{self.extension}")
        if not resource.is_file():
            raise SourceNotFoundError(code, location)
        return _read_utf8(resource, code, location)

    def read_manifest(self) -> Optional[str]:
        resource = self._root().joinpath(self.manifest_name)
        if not resource.is_file():
            return None
        return _read_utf8(resource, "manifest", f"{self.package}:{self.subdirectory}")

    def available_codes(self) -> List[str]:
        root = self._root()
        if not root.is_dir():
            return []
        return sorted(
            entry.name[: -len(self.extension)]
            for entry in root.iterdir()
            if entry.is_file()
            and entry.name.endswith(self.extension)
            and entry.name != self.manifest_name
        )


class InMemorySourceReader(SourceReader):
    """Serves pack documents from a mapping of code -> raw text.

    Attributes:
        documents: Raw pack documents keyed by language code.
        manifest: Optional raw manifest document.
    """

    def __init__(self, documents: Mapping[str, str], manifest: Optional[str] = None):
        self.documents: Dict[str, str] = dict(documents)
        self.manifest = manifest

    def read(self, code: str) -> str:
        try:
            return self.documents[code]
        except KeyError as e:
            raise SourceNotFoundError(code) from e

    def read_manifest(self) -> Optional[str]:
        return self.manifest

    def available_codes(self) -> List[str]:
        return list(self.documents.keys())
