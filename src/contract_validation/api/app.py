"""FastAPI application for the Contract Validation System.

This module exposes the ContractValidator over HTTP.

Usage (from project root, after installing the package and uvicorn):

    uvicorn contract_validation.api.app:app --reload

Then send a multipart/form-data POST request to
/api/contracts/{contract_id}/validate with a `file` field.
"""

from __future__ import annotations

import io
import logging
import uuid
from functools import lru_cache
from pathlib import PurePath
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from ..config.config_manager import ConfigurationManager
from ..config.models import ValidatorConfig
from ..serialization import result_to_dict
from ..storage.database import DatabaseManager
from ..storage.repository import SqlContractRepository
from ..validator import ContractValidator


logger = logging.getLogger(__name__)

ALLOWED_UPLOAD_EXTENSIONS = (".pdf", ".docx", ".doc")

app = FastAPI(title="Contract Validation API", version="0.1.0")


@lru_cache(maxsize=1)
def get_config() -> ValidatorConfig:
    """Validator settings from CONTRACT_VALIDATION_* environment variables."""
    manager = ConfigurationManager()
    manager.load_from_env()
    return manager.configuration


@lru_cache(maxsize=1)
def get_db_manager() -> DatabaseManager:
    return DatabaseManager(database_url=get_config().database_url)


def get_validator(
    config: ValidatorConfig = Depends(get_config),
    db_manager: DatabaseManager = Depends(get_db_manager),
) -> ContractValidator:
    return ContractValidator(SqlContractRepository(db_manager), config=config)


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"success": False, "errorMessage": message},
    )


def _too_large(size: int, limit: int) -> JSONResponse:
    return _bad_request(
        f"File size ({size // 1024 // 1024}MB) exceeds maximum allowed size "
        f"({limit // 1024 // 1024}MB)."
    )


@app.post("/api/contracts/{contract_id}/validate")
async def validate_contract(
    contract_id: uuid.UUID,
    file: Optional[UploadFile] = File(None, description="Contract document (.docx)"),
    config: ValidatorConfig = Depends(get_config),
    validator: ContractValidator = Depends(get_validator),
) -> JSONResponse:
    """Validate an uploaded contract document against the stored contract.

    This endpoint:
    - Rejects missing uploads, unknown extensions and oversized files.
    - Runs ContractValidator.validate on the uploaded content.
    - Returns the validation result; failed validations are a 400.
    """
    if file is None or not file.filename:
        return _bad_request("No file uploaded. Please upload a contract document (PDF or DOCX).")

    extension = PurePath(file.filename).suffix.lower()
    if extension not in ALLOWED_UPLOAD_EXTENSIONS:
        return _bad_request(
            f"Invalid file type '{extension}'. Only PDF and DOCX files are supported."
        )

    try:
        if file.size is not None and file.size > config.max_upload_bytes:
            return _too_large(file.size, config.max_upload_bytes)

        content = await file.read()
        if len(content) > config.max_upload_bytes:
            return _too_large(len(content), config.max_upload_bytes)

        logger.info(
            f"Validating contract {contract_id} with document: {file.filename} ({len(content)} bytes)"
        )
        result = validator.validate(contract_id, io.BytesIO(content), file.filename)

    except Exception as exc:  # noqa: BLE001
        logger.exception(f"Error validating contract {contract_id}")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    finally:
        await file.close()

    payload = result_to_dict(result)
    if not result.success:
        logger.warning(f"Contract validation failed for {contract_id}: {result.error_message}")
        return JSONResponse(status_code=400, content=payload)

    logger.info(
        f"Contract {contract_id} validated successfully: {result.summary.match_percentage}% match"
    )
    return JSONResponse(status_code=200, content=payload)


@app.get("/api/health")
async def health(db_manager: DatabaseManager = Depends(get_db_manager)) -> JSONResponse:
    """Report whether the contract store is reachable."""
    healthy = db_manager.health_check()
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={"status": "ok" if healthy else "unavailable", "database": healthy},
    )


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
