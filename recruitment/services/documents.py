# recruitment/services/documents.py
import logging
import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

import recruitment.databases as databases
from recruitment.errors import (
    CandidateNotFoundError,
    DocumentNotFoundError,
    InvalidUploadError,
)
from recruitment.extensions import db
from recruitment.unit_of_work import atomic

logger = logging.getLogger(__name__)


def save_upload(file_storage):
    """
    Store an uploaded resume/document under ``UPLOAD_FOLDER`` and return its
    public URL (``/uploads/<name>``). Only the configured extensions pass.
    """
    filename = secure_filename(file_storage.filename or "")
    ext = os.path.splitext(filename)[1].lower().lstrip(".")
    if not filename or ext not in current_app.config["ALLOWED_UPLOAD_EXTENSIONS"]:
        raise InvalidUploadError()

    upload_folder = current_app.config["UPLOAD_FOLDER"]
    if not os.path.exists(upload_folder):
        os.makedirs(upload_folder)

    stored_name = f"{uuid.uuid4().hex}.{ext}"
    file_storage.save(os.path.join(upload_folder, stored_name))
    logger.info(f"📎 Stored upload '{filename}' as {stored_name}")
    return f"/uploads/{stored_name}"


def delete_upload(file_url):
    """Remove a file stored by ``save_upload``; unknown names are ignored."""
    path = os.path.join(current_app.config["UPLOAD_FOLDER"], os.path.basename(file_url))
    if os.path.exists(path):
        os.remove(path)
        logger.info(f"🧹 Removed orphaned upload {file_url}")


class DocumentService:

    @staticmethod
    def list_documents(candidate_id):
        return databases.find_candidate_documents(candidate_id)

    @staticmethod
    def add_document(candidate_id, name, file_url=None, document_type=None):
        with atomic():
            if not databases.get_candidate_by_id(candidate_id):
                raise CandidateNotFoundError(f"Candidate with ID {candidate_id} not found")
            document = databases.create_candidate_document(
                candidate_id, name, file_url=file_url, document_type=document_type
            )
        return document

    @staticmethod
    def update_document(document_id, **changes):
        with atomic():
            document = DocumentService._get(document_id)
            if changes.get("name") is not None:
                document.name = changes["name"]
            if changes.get("document_type") is not None:
                document.document_type = changes["document_type"]
        return document

    @staticmethod
    def remove_document(document_id):
        with atomic():
            document = DocumentService._get(document_id)
            db.session.delete(document)
        return {"id": document_id}

    @staticmethod
    def _get(document_id):
        document = databases.get_candidate_document_by_id(document_id)
        if not document:
            raise DocumentNotFoundError()
        return document
