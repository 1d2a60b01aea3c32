import os
from fastapi import APIRouter, HTTPException
from license_finder.core import config
from license_finder.models.schemas import ScanRequest, ScanResponse
from license_finder.services.analysis_workflow import InvalidDirectoryError, perform_scan
from license_finder.services.corpus import CorpusLoadError


router = APIRouter()


def _is_inside_base_dir(path: str, base_dir: str) -> bool:
    real_path = os.path.realpath(path)
    real_base = os.path.realpath(base_dir)
    return os.path.commonpath([real_path, real_base]) == real_base


@router.post("/scan", response_model=ScanResponse)
def scan_directory(payload: ScanRequest):
    # 1) Restricts the scan to the configured base directory, if any
    if config.SCAN_BASE_DIR and not _is_inside_base_dir(payload.path, config.SCAN_BASE_DIR):
        raise HTTPException(
            status_code=403,
            detail=f"Path {payload.path} is outside of the allowed scan directory",
        )

    # 2) Scans the tree and resolves the main license
    try:
        return perform_scan(payload.path, include_files=payload.include_files)
    except InvalidDirectoryError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CorpusLoadError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Can't read {e.filename}: {e.strerror or e}")
