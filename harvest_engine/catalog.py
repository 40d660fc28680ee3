"""The fixed catalog of CSV harvest job types.

Lookup is by the key that arrives from outside (typically a request
parameter), compared case-insensitively. Unknown keys are a normal outcome and
return None; callers decide what to show.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .models import JobType


JOB_TYPES: Tuple[JobType, ...] = (
    JobType(
        key="csvGrant",
        template_file_name="granttemplate.csv",
        script_file_name="CSVtoRDFgrant.sh",
        friendly_name="Grant",
        link_header="Imported Grants",
        no_new_data_message="No new grants were imported.",
        rdf_types_for_links=("http://vivoweb.org/ontology/core#Grant",),
    ),
    JobType(
        key="csvPerson",
        template_file_name="persontemplate.csv",
        script_file_name="CSVtoRDFperson.sh",
        friendly_name="Person",
        link_header="Imported Persons",
        no_new_data_message="No new persons were imported.",
        rdf_types_for_links=("http://xmlns.com/foaf/0.1/Person",),
    ),
)


def lookup_job_type(key: Optional[str]) -> Optional[JobType]:
    """Return the job type whose key matches `key` (ignoring case), or None."""
    if not key:
        return None
    k = key.casefold()
    for job_type in JOB_TYPES:
        if job_type.key.casefold() == k:
            return job_type
    return None


def has_job_type(key: Optional[str]) -> bool:
    """True if the catalog has a job type for `key`."""
    return lookup_job_type(key) is not None
