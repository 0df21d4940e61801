"""Shared dependencies for API routes."""

from services.catalog import CandidateCatalog, get_catalog


def get_candidate_catalog() -> CandidateCatalog:
    return get_catalog()
