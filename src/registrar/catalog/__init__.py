"""Course Catalog - course records with capacity and prerequisite metadata."""

from registrar.catalog.catalog import CourseCatalog, normalize_prerequisites

__all__ = [
    "CourseCatalog",
    "normalize_prerequisites",
]
