"""
This module orchestrates a license analysis: it validates the target directory,
scans the whole tree and resolves the main license from the root license file.
"""

import logging
import os
from typing import Optional
from license_finder.models.schemas import License, ScanResponse
from .classifier import FileClassifier, get_default_classifier
from .main_license import resolve_main_license
from .project_scanner import detect_file_licenses

logger = logging.getLogger(__name__)


class InvalidDirectoryError(ValueError):
    """The analysis target is missing, not a directory or not readable."""


def validate_directory(path: str) -> None:
    """
    Checks that `path` can be scanned.

    Raises:
        InvalidDirectoryError: With a distinct message for a missing path, a path that
            is not a directory and a directory that cannot be read.
    """
    if not os.path.exists(path):
        raise InvalidDirectoryError(f"Directory {path} does not exist")
    if not os.path.isdir(path):
        raise InvalidDirectoryError(f"File {path} is not a directory")
    if not os.access(path, os.R_OK | os.X_OK):
        raise InvalidDirectoryError(f"Can't read {path}: permission denied")


def perform_scan(
    path: str,
    include_files: bool = False,
    classifier: Optional[FileClassifier] = None,
) -> ScanResponse:
    """
    Runs the full analysis on a local directory.

    Args:
        path (str): The project directory.
        include_files (bool): Whether to return the per-file verdicts as well.
        classifier (FileClassifier, optional): Defaults to the bundled-corpus classifier.

    Returns:
        ScanResponse: Licenses found in the tree and the main license outcome.

    Raises:
        InvalidDirectoryError: If the directory cannot be scanned.
        CorpusLoadError: If the bundled license texts cannot be loaded.
        OSError: If the root license file cannot be read.
    """
    # 1) Validates the target before any work
    validate_directory(path)

    if classifier is None:
        classifier = get_default_classifier()

    # 2) Classifies every text file of the tree
    file_licenses = detect_file_licenses(path, classifier)
    found = set(file_licenses.values())
    licenses = [lic for lic in License if lic in found]
    logger.info("Found %d license(s) in %s", len(licenses), path)

    # 3) Identifies the declared license
    main_license = resolve_main_license(path, classifier)

    return ScanResponse(
        directory=os.path.abspath(path),
        licenses=licenses,
        main_license=main_license,
        files=file_licenses if include_files else None,
    )
