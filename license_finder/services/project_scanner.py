"""
This module walks a project tree and collects the licenses found in its text files.

Every regular file below the root is considered. Unreadable files are reported and
skipped, binary files are skipped without being classified, and the verdicts of the
remaining files are folded into the project license set.
"""

import logging
import os
from typing import Callable, Dict, Optional, Set
from license_finder.core.config import TEXT_SAMPLE_SIZE
from license_finder.models.schemas import License
from .classifier import FileClassifier, get_default_classifier
from .text_filter import is_text

logger = logging.getLogger(__name__)

TextFilter = Callable[[bytes], bool]


def _log_walk_error(error: OSError):
    logger.warning("Skipping %s: %s", error.filename, error.strerror or error)


def _read_text_content(path: str, text_filter: TextFilter) -> Optional[str]:
    """
    Reads a file if its leading bytes pass the text filter.

    Returns:
        Optional[str]: The decoded content, or None for a binary file.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "rb") as f:
        sample = f.read(TEXT_SAMPLE_SIZE)
        if not text_filter(sample):
            return None
        data = sample + f.read()
    return data.decode("utf-8", errors="ignore")


def iter_files(root: str):
    """
    Yields the path of every regular file below `root`, in sorted order.
    """
    for path, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for fname in sorted(filenames):
            file_path = os.path.join(path, fname)
            if os.path.isfile(file_path):
                yield file_path


def detect_file_licenses(
    root: str,
    classifier: Optional[FileClassifier] = None,
    text_filter: TextFilter = is_text,
) -> Dict[str, License]:
    """
    Classifies every text file in the tree.

    Args:
        root (str): The project directory.
        classifier (FileClassifier, optional): Defaults to the bundled-corpus classifier.
        text_filter (Callable[[bytes], bool]): Decides whether a file sample is text.

    Returns:
        Dict[str, License]: { relative_path: license } for the files that matched a license.
            Paths use '/' as separator.
    """
    if classifier is None:
        classifier = get_default_classifier()

    results: Dict[str, License] = {}

    for file_path in iter_files(root):
        try:
            content = _read_text_content(file_path, text_filter)
        except PermissionError:
            logger.warning("Skipping %s: permission denied", file_path)
            continue
        except OSError as e:
            logger.warning("Skipping %s: %s", file_path, e)
            continue

        if content is None:
            logger.debug("Skipping binary file %s", file_path)
            continue

        license = classifier.classify(content)
        if license is not None:
            rel_path = os.path.relpath(file_path, root).replace(os.sep, "/")
            logger.debug("%s: %s", rel_path, license.name)
            results[rel_path] = license

    return results


def scan_project(
    root: str,
    classifier: Optional[FileClassifier] = None,
    text_filter: TextFilter = is_text,
) -> Set[License]:
    """
    Returns the set of licenses found anywhere in the tree (possibly empty).
    """
    return set(detect_file_licenses(root, classifier, text_filter).values())
