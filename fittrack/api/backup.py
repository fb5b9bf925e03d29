"""
Backup and data management API endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel

from fittrack.api.deps import get_backup_service, get_storage, get_store
from fittrack.core.exceptions import BackupFormatError, BackupParseError
from fittrack.core.logging import get_logger
from fittrack.services.backup import BackupService
from fittrack.services.records import RecordStore
from fittrack.services.storage import StorageAdapter

logger = get_logger(__name__)
router = APIRouter()

APP_VERSION = "1.0"


# ========================================
# Request/Response Schemas
# ========================================

class ProfileResponse(BaseModel):
    """Stored data overview."""
    weightEntries: int
    totalWorkouts: int
    dataSizeKb: float
    appVersion: str
    storageBackend: str


class ImportResponse(BaseModel):
    """Result of a merged import."""
    message: str
    importedWeights: int
    importedWorkouts: int
    weightEntries: int
    totalWorkouts: int
    dataSizeKb: float


# ========================================
# API Endpoints
# ========================================

@router.get("/profile", response_model=ProfileResponse)
def profile(
    store: RecordStore = Depends(get_store),
    storage: StorageAdapter = Depends(get_storage),
):
    """
    Get entry counts and stored data size.
    """
    return ProfileResponse(
        weightEntries=len(store.load_weights()),
        totalWorkouts=len(store.load_workouts()),
        dataSizeKb=store.data_size_kb(),
        appVersion=APP_VERSION,
        storageBackend=storage.backend_name,
    )


@router.get("/export")
def export_backup(service: BackupService = Depends(get_backup_service)):
    """
    Download all data as a JSON backup file.
    """
    content = service.export_json()
    filename = service.backup_filename()

    return Response(
        content=content,
        media_type=service.get_content_type(),
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"'
        }
    )


@router.post("/import", response_model=ImportResponse)
async def import_backup(
    request: Request,
    service: BackupService = Depends(get_backup_service),
):
    """
    Merge a backup file (sent as the raw request body) into the stored data.

    Existing entries win over imported entries with the same id.
    """
    body = await request.body()

    try:
        result = service.import_backup(body)
    except BackupFormatError as e:
        logger.warning("Rejected backup import", reason="format")
        raise HTTPException(status_code=400, detail=str(e))
    except BackupParseError as e:
        logger.warning("Rejected backup import", reason="parse")
        raise HTTPException(status_code=400, detail=str(e))

    return ImportResponse(
        message="Data imported successfully!",
        importedWeights=result.imported_weights,
        importedWorkouts=result.imported_workouts,
        weightEntries=result.weight_entries,
        totalWorkouts=result.total_workouts,
        dataSizeKb=result.data_size_kb,
    )


@router.delete("/data")
def clear_all_data(store: RecordStore = Depends(get_store)):
    """
    Permanently delete all weight and workout data.
    """
    store.clear_all()
    return {"message": "All data has been cleared."}
