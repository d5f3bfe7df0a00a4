"""Base exceptions for conventioncheck domain."""


class ConventionCheckError(Exception):
    """Root exception for all conventioncheck errors.

    All domain exceptions inherit from this.
    Allows catching all conventioncheck-specific errors.

    Violations found during a scan are never raised: they are collected
    into the ScanResult. Exceptions signal misuse of the library itself.
    """
