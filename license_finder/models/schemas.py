"""
Domain types and API schemas shared by the scanner, the resolver, the CLI and the HTTP API.
"""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, model_validator


class License(Enum):
    """
    Licenses recognized by the classifier.

    Declaration order is the report order. The value is the label used in the text report.
    """
    MIT = "MIT"
    APACHE2 = "Apache 2.0"
    GPL3 = "GPL 3.0"
    LGPL3 = "LGPL 3.0"
    BSD3CLAUSE = "BSD 3-Clause"

    @property
    def label(self) -> str:
        return self.value


class MainLicenseStatus(str, Enum):
    ABSENT = "absent"
    UNRECOGNIZED = "unrecognized"
    RESOLVED = "resolved"


class MainLicenseResult(BaseModel):
    """
    Outcome of the root license file lookup.

    ABSENT: no LICENSE/LICENCE/COPYING file at the top level.
    UNRECOGNIZED: the file exists but matches no known license (rendered as UNKNOWN).
    RESOLVED: the file matches `license`.
    """
    status: MainLicenseStatus
    license: Optional[License] = None
    path: Optional[str] = None

    @model_validator(mode="after")
    def check_license_matches_status(self):
        if (self.status == MainLicenseStatus.RESOLVED) != (self.license is not None):
            raise ValueError("license must be set if and only if status is 'resolved'")
        if self.status == MainLicenseStatus.ABSENT and self.path is not None:
            raise ValueError("an absent main license has no path")
        return self

    @classmethod
    def absent(cls) -> "MainLicenseResult":
        return cls(status=MainLicenseStatus.ABSENT)

    @classmethod
    def unrecognized(cls, path: str) -> "MainLicenseResult":
        return cls(status=MainLicenseStatus.UNRECOGNIZED, path=path)

    @classmethod
    def resolved(cls, license: License, path: str) -> "MainLicenseResult":
        return cls(status=MainLicenseStatus.RESOLVED, license=license, path=path)

    @property
    def display_name(self) -> str:
        """License enum name, 'UNKNOWN' for an unrecognized file, 'null' when there is no file."""
        if self.status == MainLicenseStatus.RESOLVED:
            return self.license.name
        if self.status == MainLicenseStatus.UNRECOGNIZED:
            return "UNKNOWN"
        return "null"


class ScanRequest(BaseModel):
    path: str
    include_files: bool = False


class ScanResponse(BaseModel):
    directory: str
    licenses: List[License]
    main_license: MainLicenseResult
    files: Optional[Dict[str, License]] = None

    def has_license(self, license: License) -> bool:
        return license in self.licenses
