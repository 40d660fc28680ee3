"""Data models for the harvest engine.

The key idea: a job type is plain immutable data. Callers look one up by its
external key, and everything else (template file, script file, labels, RDF
types used when listing harvested entities) hangs off that record.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class JobType(BaseModel):
    """A catalog entry describing one kind of CSV harvest.

    Instances are frozen; the catalog hands the same objects to every request.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="External identifier, e.g. 'csvGrant'. Matched case-insensitively.")
    template_file_name: str = Field(..., description="CSV template the upload is validated against.")
    script_file_name: str = Field(..., description="Shell script template run after a successful upload.")

    friendly_name: str = Field(..., description="Name for the type of data imported, e.g. 'Grant'.")
    link_header: str = Field(..., description="Heading shown above links to newly-harvested entities.")
    no_new_data_message: str = Field(..., description="Shown when the harvest produced nothing new.")

    rdf_types_for_links: Tuple[str, ...] = Field(
        default=(),
        description="rdf:type URIs used to pick out newly-harvested entities.",
    )


class ScriptPaths(BaseModel):
    """Resolved values substituted into a script template."""

    model_config = ConfigDict(frozen=True)

    working_directory: str
    uploads_folder: str
    harvested_data_path: str
