"""
This module renders a license analysis as the plain-text report printed by the CLI.
"""

from license_finder.models.schemas import License, ScanResponse


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def render_report(response: ScanResponse) -> str:
    """
    Formats one `<label>: <true|false>` line per known license, in declaration order,
    followed by the main license line.

    Args:
        response (ScanResponse): The analysis result.

    Returns:
        str: The report, newline-terminated.
    """
    lines = [f"{lic.label}: {_bool_text(response.has_license(lic))}" for lic in License]
    lines.append(f"Main license: {response.main_license.display_name}")
    return "\n".join(lines) + "\n"


def render_file_verdicts(response: ScanResponse) -> str:
    """
    Formats the per-file verdicts as `<path>: <LICENSE_NAME>` lines, sorted by path.
    """
    if not response.files:
        return ""
    return "".join(f"{path}: {lic.name}\n" for path, lic in sorted(response.files.items()))
