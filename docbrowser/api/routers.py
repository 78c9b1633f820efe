"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from docbrowser.api.dependencies import get_file_store
from docbrowser.api.schemas import (
    ContentResponse,
    CreateFolderRequest,
    ErrorResponse,
    FilterRequest,
    ListingResponse,
    MoveRequest,
    PathRequest,
    RenameRequest,
    WriteContentRequest,
)
from docbrowser.exceptions import (
    DecodeError,
    FileOperationError,
    ReadError,
    WriteError,
)
from docbrowser.use_cases.files.operation_result import OperationResult

router = APIRouter()

_ERROR_STATUS = {
    ReadError: 404,
    DecodeError: 415,
    WriteError: 507,
    FileOperationError: 409,
}

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def _status_for(error: Exception) -> int:
    for error_cls, status in _ERROR_STATUS.items():
        if isinstance(error, error_cls):
            return status
    return 400


def _listing_or_raise(result: OperationResult) -> ListingResponse:
    """
    Convert an operation result into the listing response.

    Raises:
        HTTPException: If the operation failed
    """
    if not result.ok:
        raise HTTPException(status_code=_status_for(result.error), detail=result.message)
    return ListingResponse.from_listing(result.listing)


@router.get("/files", response_model=ListingResponse, responses=_ERRORS)
def get_listing():
    """Return the current listing (visible entries)."""
    return ListingResponse.from_listing(get_file_store().listing)


@router.post("/files/root", response_model=ListingResponse, responses=_ERRORS)
def open_root():
    return _listing_or_raise(get_file_store().set_root())


@router.post("/files/enter", response_model=ListingResponse, responses=_ERRORS)
def enter_directory(body: PathRequest):
    """
    Enter a directory.

    Args:
        body: Request body with the directory path

    Returns:
        ListingResponse: Listing of the entered directory

    Raises:
        HTTPException: 404 if the directory is missing or unreadable
    """
    return _listing_or_raise(get_file_store().enter(body.path))


@router.post("/files/up", response_model=ListingResponse, responses=_ERRORS)
def go_up():
    return _listing_or_raise(get_file_store().go_up())


@router.post("/files/filter", response_model=ListingResponse, responses=_ERRORS)
def set_filter(body: FilterRequest):
    return _listing_or_raise(get_file_store().set_filter(body.text))


@router.get(
    "/files/content",
    response_model=ContentResponse,
    responses={**_ERRORS, 415: {"model": ErrorResponse}},
)
def read_content(
    path: str = Query(..., description="File path, absolute or relative to the root"),
):
    """
    Read a file as text.

    Raises:
        HTTPException: 404 if missing, 415 if the file is not text
    """
    result = get_file_store().read(path)
    if not result.ok:
        raise HTTPException(status_code=_status_for(result.error), detail=result.message)
    return ContentResponse(path=path, content=result.value)


@router.put(
    "/files/content",
    response_model=ListingResponse,
    responses={**_ERRORS, 507: {"model": ErrorResponse}},
)
def write_content(body: WriteContentRequest):
    return _listing_or_raise(get_file_store().write(body.path, body.content))


@router.post("/files/copy", response_model=ListingResponse, responses=_ERRORS)
def copy_entry(body: PathRequest):
    return _listing_or_raise(get_file_store().copy(body.path))


@router.post("/files/move", response_model=ListingResponse, responses=_ERRORS)
def move_entry(body: MoveRequest):
    """
    Move an entry into another directory (the root when no destination is given).
    """
    return _listing_or_raise(get_file_store().move(body.path, body.destination))


@router.post("/files/rename", response_model=ListingResponse, responses=_ERRORS)
def rename_entry(body: RenameRequest):
    return _listing_or_raise(get_file_store().rename(body.path, body.new_name))


@router.delete("/files", response_model=ListingResponse, responses=_ERRORS)
def delete_entry(
    path: str = Query(..., description="Entry path, absolute or relative to the root"),
):
    return _listing_or_raise(get_file_store().delete(path))


@router.post("/folders", response_model=ListingResponse, responses=_ERRORS)
def create_folder(body: Optional[CreateFolderRequest] = None):
    name = body.name if body is not None else None
    return _listing_or_raise(get_file_store().create_folder(name))
