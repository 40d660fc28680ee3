"""CSV harvest engine package.

The package is structured around the two things a file harvest needs:
- `validation.py` checks an uploaded CSV against its template (header + row shape).
- `templating.py` fills a harvest script template with resolved paths.
- `catalog.py` and `models.py` define the fixed set of job types.
- `jobs/` binds a job type to one session and one set of configured roots.
"""
