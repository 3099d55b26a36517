"""
Document API endpoints.

Routes:
- GET /session - Current session snapshot
- POST /session/document - Select a PDF and start processing it
- DELETE /session/document - Drop the document ("Change File")
- GET /session/document/content - Bytes of the local handle, for the viewer frame

Dependencies: pdf_reader.application.controller, pdf_reader.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import FileResponse

from pdf_reader.api.deps import get_controller
from pdf_reader.application.controller import ReaderController
from pdf_reader.core.exceptions import ValidationError
from pdf_reader.models.document import DocumentCandidate
from pdf_reader.models.session import SessionSnapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["documents"])

_STATUS_BY_FIELD = {
    "media_type": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "size": status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
}


@router.get("", response_model=SessionSnapshot)
async def get_session(
    controller: ReaderController = Depends(get_controller),
) -> SessionSnapshot:
    """Return everything the interface needs to render itself."""
    return controller.snapshot()


@router.post("/document", response_model=SessionSnapshot, status_code=status.HTTP_202_ACCEPTED)
async def select_document(
    file: UploadFile = File(...),
    controller: ReaderController = Depends(get_controller),
) -> SessionSnapshot:
    """
    Select a document and start processing it in the background.

    Poll GET /session until the state leaves "uploading".

    Args:
        file: Uploaded PDF
        controller: Injected reader controller

    Returns:
        SessionSnapshot: State right after selection (processing notice only)

    Raises:
        HTTPException(415): Not a PDF
        HTTPException(413): File too large
        HTTPException(400): Any other rejection
        HTTPException(507): Local copy for the viewer could not be written
    """
    candidate = DocumentCandidate(
        name=file.filename or "document.pdf",
        media_type=file.content_type or "",
        content=await file.read(),
    )

    try:
        controller.select(candidate)
    except ValidationError as e:
        logger.info(
            "Document selection rejected",
            extra={"file_name": candidate.name, "error": str(e)},
        )
        raise HTTPException(
            status_code=_STATUS_BY_FIELD.get(e.field, status.HTTP_400_BAD_REQUEST),
            detail=e.message,
        )
    except OSError as e:
        logger.error(
            "Document could not be stored locally",
            extra={"file_name": candidate.name, "error": str(e)},
        )
        raise HTTPException(
            status_code=status.HTTP_507_INSUFFICIENT_STORAGE,
            detail="The selected file could not be stored for viewing. Please try again.",
        )

    return controller.snapshot()


@router.delete("/document", status_code=status.HTTP_204_NO_CONTENT)
async def reset_document(
    controller: ReaderController = Depends(get_controller),
) -> None:
    """Release the document and clear the transcript."""
    controller.reset()


@router.get("/document/content")
async def get_document_content(
    controller: ReaderController = Depends(get_controller),
) -> FileResponse:
    """
    Serve the selected document from its local handle.

    Raises:
        HTTPException(404): No document selected
    """
    document = controller.session.document
    if document is None or not document.handle.path.exists():
        raise HTTPException(status_code=404, detail="No document selected")

    return FileResponse(
        document.handle.path,
        media_type=document.media_type,
        filename=document.name,
        content_disposition_type="inline",
    )
