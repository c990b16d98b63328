"""
PhotoShare Backend: Database Test Routes
=========================================

What:  Connectivity checks against the database.

Route Inventory:
    GET /test           same as /test/info
    GET /test/info      the SchemaInfo record
    GET /test/counts    {"user": n, "photo": n, "schemaInfo": n}
    GET /test/<other>   400 "Bad param <other>"
"""

from typing import Union

from fastapi import APIRouter, Depends

from photoshare.database import DocumentStore
from photoshare.dependencies import get_store
from photoshare.exceptions import BadParameterError
from photoshare.models import SchemaInfo
from photoshare.schemas.responses import CountsResponse
from photoshare.services.schema_service import schema_service

router = APIRouter(prefix="/test", tags=["Test"])


@router.get(
    "",
    response_model=SchemaInfo,
    responses={500: {"description": "Database error or missing SchemaInfo"}},
    summary="SchemaInfo record",
)
async def test_default(store: DocumentStore = Depends(get_store)) -> SchemaInfo:
    return await schema_service.get_info(store)


@router.get(
    "/{param}",
    response_model=Union[SchemaInfo, CountsResponse],
    responses={
        400: {"description": "Unrecognized parameter"},
        500: {"description": "Database error or missing SchemaInfo"},
    },
    summary="SchemaInfo record or collection counts",
)
async def test_param(
    param: str, store: DocumentStore = Depends(get_store)
) -> Union[SchemaInfo, CountsResponse]:
    if param == "info":
        return await schema_service.get_info(store)
    if param == "counts":
        return await schema_service.get_counts(store)
    raise BadParameterError(param)
