"""
This module resolves the declared license of a project from its root license file.

Only the immediate children of the root are considered. A file named LICENSE,
LICENCE or COPYING (any case, any extension) is the declaration file; its content
decides between a known license and UNKNOWN.
"""

import logging
import os
from typing import Optional
from license_finder.models.schemas import MainLicenseResult
from .classifier import FileClassifier, get_default_classifier

logger = logging.getLogger(__name__)

MAIN_LICENSE_NAMES = ("LICENSE", "LICENCE", "COPYING")


def _is_main_license_name(fname: str) -> bool:
    stem, _ = os.path.splitext(fname)
    return stem.upper() in MAIN_LICENSE_NAMES


def find_main_license_file(root: str) -> Optional[str]:
    """
    Locates the root license declaration file.

    Entries are visited in name order; subdirectories are never searched.

    Args:
        root (str): The project directory.

    Returns:
        Optional[str]: The path of the first matching regular file, or None.
    """
    for fname in sorted(os.listdir(root)):
        if not _is_main_license_name(fname):
            continue
        path = os.path.join(root, fname)
        if os.path.isfile(path):
            return path
    return None


def resolve_main_license(root: str, classifier: Optional[FileClassifier] = None) -> MainLicenseResult:
    """
    Identifies the main license of the project.

    Returns:
        MainLicenseResult: ABSENT when there is no declaration file, UNRECOGNIZED when
            its content matches no known license, RESOLVED otherwise.

    Raises:
        OSError: If the declaration file cannot be read.
    """
    license_path = find_main_license_file(root)
    if license_path is None:
        logger.info("No LICENSE/LICENCE/COPYING file in %s", root)
        return MainLicenseResult.absent()

    if classifier is None:
        classifier = get_default_classifier()

    rel_path = os.path.relpath(license_path, root)
    license = classifier.classify_file(license_path)
    if license is None:
        logger.info("Main license file %s does not match any known license", rel_path)
        return MainLicenseResult.unrecognized(rel_path)

    return MainLicenseResult.resolved(license, rel_path)
