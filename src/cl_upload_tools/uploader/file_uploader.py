"""Upload validation, safe renaming and the final move."""

from collections.abc import Callable
from pathlib import Path
from typing import Final

from loguru import logger

from ..common.errors import (
    CannotMoveFileError,
    TransportError,
    UploadError,
    WrongExtensionError,
    WrongMimeTypeError,
)
from ..common.schemas import ResolvedUpload, UploadPolicy, UploadRequest
from ..common.upload_storage import FileMoveError, UploadStorage
from ..common.upload_storage_impl import LocalUploadStorage
from ..utils.sanitize import DEFAULT_BASENAME, sanitize_filename
from ..utils.timestamp import microtime_digits

MAX_CLAIM_ATTEMPTS: Final[int] = 5


def build_name(base: str, extension: str | None, suffix: str = "") -> str:
    name = base + suffix
    if extension is None:
        return name
    return f"{name}.{extension}"


class FileUploader:
    """
    Validates one uploaded file against an UploadPolicy and moves it into the
    policy's destination directory under a safe, non-colliding name.

    Usage:
        uploader = FileUploader(UploadPolicy.images("/srv/media"))
        resolved = uploader.upload(UploadRequest.from_files(files, "file"))
    """

    def __init__(
        self,
        policy: UploadPolicy,
        storage: UploadStorage | None = None,
        sanitizer: Callable[[str], str] = sanitize_filename,
    ):
        self.policy: UploadPolicy = policy
        self.storage: UploadStorage = storage or LocalUploadStorage()
        self.sanitizer: Callable[[str], str] = sanitizer

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, request: UploadRequest) -> None:
        """
        Check MIME type, extension and transport status, in that order.

        Raises:
            WrongMimeTypeError: MIME type not in a restricted allow-list
            WrongExtensionError: extension not in a restricted allow-list
            TransportError: the transport reported a non-zero error code
        """
        if not self.policy.mime_type_allowed(request.detected_mime_type):
            raise WrongMimeTypeError(request.detected_mime_type)

        if not self.policy.extension_allowed(request.extension):
            raise WrongExtensionError(request.extension)

        if request.transport_error_code != 0:
            raise TransportError(request.transport_error_code)

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    def _base_name(self, upload_file_name: str) -> str:
        return self.sanitizer(upload_file_name) or DEFAULT_BASENAME

    def safe_name(self, request: UploadRequest) -> str:
        """
        Sanitized base name plus the original extension.

        If that name is already taken in the destination directory, the
        current time in microseconds is appended to the base name.
        """
        base = self._base_name(request.upload_file_name)
        name = build_name(base, request.extension)

        if self.storage.exists(self.policy.destination_directory / name):
            name = build_name(base, request.extension, microtime_digits())
            logger.debug(f"Name collision for {request.original_name!r}, using {name!r}")

        return name

    def resolve(self, request: UploadRequest) -> ResolvedUpload:
        try:
            self.validate(request)
        except UploadError as exc:
            logger.warning(f"Rejected upload {request.original_name!r}: {exc}")
            raise

        return ResolvedUpload(
            safe_name=self.safe_name(request),
            destination_directory=self.policy.destination_directory,
            temp_path=request.temp_path,
            upload_file_name=request.upload_file_name,
            extension=request.extension,
        )

    # ------------------------------------------------------------------
    # Persisting
    # ------------------------------------------------------------------

    def _claim(self, resolved: ResolvedUpload) -> ResolvedUpload:
        """Reserve the destination, renaming with a fresh timestamp on conflict."""
        candidate = resolved
        for _ in range(MAX_CLAIM_ATTEMPTS):
            if self.storage.claim(candidate.destination_path):
                return candidate

            base = self._base_name(resolved.upload_file_name)
            candidate = resolved.model_copy(
                update={"safe_name": build_name(base, resolved.extension, microtime_digits())}
            )
            logger.debug(f"Destination taken, retrying as {candidate.safe_name!r}")

        raise CannotMoveFileError(candidate.destination_path)

    def commit(self, resolved: ResolvedUpload) -> ResolvedUpload:
        """
        Move the temp file to its destination. Runs at most once per
        ResolvedUpload.

        Returns:
            The upload as written; its name differs from ``resolved`` only
            when another writer took the name in the meantime.

        Raises:
            CannotMoveFileError: the destination could not be claimed or the
                move failed
        """
        if resolved.committed:
            raise RuntimeError(f"Upload already committed: {resolved.destination_path}")

        claimed = self._claim(resolved)
        try:
            self.storage.move(claimed.temp_path, claimed.destination_path)
        except FileMoveError as exc:
            self.storage.release(claimed.destination_path)
            logger.warning(f"Could not move upload to {claimed.destination_path}: {exc}")
            raise CannotMoveFileError(claimed.destination_path) from exc

        resolved.mark_committed()
        claimed.mark_committed()
        logger.info(f"Stored upload {resolved.upload_file_name!r} as {claimed.destination_path}")
        return claimed

    def upload(self, request: UploadRequest) -> ResolvedUpload:
        """Validate, rename and move ``request`` in one step."""
        return self.commit(self.resolve(request))


def upload_file(
    request: UploadRequest,
    policy: UploadPolicy,
    storage: UploadStorage | None = None,
) -> Path:
    """Convenience wrapper returning the stored file path."""
    return FileUploader(policy, storage).upload(request).destination_path
