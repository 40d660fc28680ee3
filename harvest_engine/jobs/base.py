"""Base classes for file harvest jobs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..utils import PathLike


class FileHarvestJob(ABC):
    """Abstract base class for a harvest driven by an uploaded file."""

    @abstractmethod
    def validate_upload(self, path: PathLike) -> Optional[str]:
        """Check an uploaded file; return None if it is usable, else a message."""
        raise NotImplementedError

    @abstractmethod
    def get_script(self) -> Optional[str]:
        """Return the harvest script to run, or None if it isn't available."""
        raise NotImplementedError

    @property
    @abstractmethod
    def additions_file_path(self) -> str:
        """Where the harvest writes the RDF it added."""
        raise NotImplementedError

    @property
    @abstractmethod
    def page_header(self) -> str:
        """Heading for the harvest page, e.g. "Harvest Grant data from CSV file(s)"."""
        raise NotImplementedError

    @property
    @abstractmethod
    def link_header(self) -> str:
        """Heading shown above links to newly-harvested entities."""
        raise NotImplementedError

    @property
    @abstractmethod
    def template_file_path(self) -> str:
        """Path of the template uploads are checked against."""
        raise NotImplementedError

    @property
    @abstractmethod
    def rdf_types_for_links(self) -> List[str]:
        """rdf:type URIs used to find newly-harvested entities."""
        raise NotImplementedError

    @property
    @abstractmethod
    def template_download_help(self) -> str:
        """Help text for the template download link."""
        raise NotImplementedError

    @property
    @abstractmethod
    def template_fill_in_help(self) -> str:
        """HTML help explaining how to fill in the template."""
        raise NotImplementedError

    @property
    @abstractmethod
    def no_new_data_message(self) -> str:
        """Shown when the harvest added nothing new."""
        raise NotImplementedError
