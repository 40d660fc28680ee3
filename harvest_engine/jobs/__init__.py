"""Harvest jobs: one job type bound to one session and one set of paths."""
