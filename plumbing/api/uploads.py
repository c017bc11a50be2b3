"""Multipart helpers.

Collection, item and brand endpoints receive a JSON document in a form
field next to the uploaded files. Per-file options travel as extra form
fields named after the file: ``is_main_<filename>`` and
``hash_color_<filename>``.
"""

from typing import TypeVar

from fastapi import Request, UploadFile
from pydantic import BaseModel, ValidationError

from plumbing.application.photo_service import PhotoUpload
from plumbing.domain.exceptions import InvalidPayloadError

M = TypeVar("M", bound=BaseModel)


def parse_payload(model: type[M], raw: str, field: str) -> M:
    """Parse the JSON form field of a multipart request.

    Args:
        model: Schema of the document.
        raw: Raw field value.
        field: Form field name, used in the error.

    Returns:
        Validated document.

    Raises:
        InvalidPayloadError: If the value is not valid JSON for the schema.
    """
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidPayloadError(
            f"Invalid JSON in form field '{field}'",
            details={
                "field": field,
                "errors": [
                    {"loc": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                    for err in e.errors()
                ],
            },
        ) from e


def to_upload(file: UploadFile, is_main: bool = False, hash_color: str = "") -> PhotoUpload:
    """Wrap an uploaded file for the service layer."""
    return PhotoUpload(
        file=file.file,
        filename=file.filename or "image",
        content_type=file.content_type,
        is_main=is_main,
        hash_color=hash_color,
    )


async def photo_uploads(request: Request, files: list[UploadFile] | None) -> list[PhotoUpload]:
    """Collect uploaded photos with their per-file options.

    Args:
        request: Multipart request, used to read the option fields.
        files: Uploaded files.

    Returns:
        Photos in upload order.
    """
    if not files:
        return []

    form = await request.form()
    uploads = []
    for file in files:
        is_main = str(form.get(f"is_main_{file.filename}", "")).strip().lower() == "true"
        hash_color = str(form.get(f"hash_color_{file.filename}", "")).strip()
        uploads.append(to_upload(file, is_main=is_main, hash_color=hash_color))
    return uploads
