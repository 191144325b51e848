"""Upload validation and persistence."""

from .file_uploader import MAX_CLAIM_ATTEMPTS, FileUploader, upload_file

__all__ = ["MAX_CLAIM_ATTEMPTS", "FileUploader", "upload_file"]
