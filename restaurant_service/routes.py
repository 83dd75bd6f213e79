import logging
from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from restaurant_service import queries
from restaurant_service.database import ErrorKind, Failure, Store, Success

logger = logging.getLogger(__name__)


# --- DEPENDENCIES ---
def get_store(request: Request) -> Store:
    return request.app.state.store


# --- DTOs ---
class DateRangeResponse(BaseModel):
    primera_fecha: Optional[date] = None
    ultima_fecha: Optional[date] = None


def _json(content, status_code=200):
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def _error(resource, operation, failure: Failure):
    if failure.kind is ErrorKind.SERVER_ERROR:
        logger.error(f"{resource.path}.{operation} failed: {failure.message}")
    return JSONResponse(status_code=failure.kind.value, content={"error": failure.message})


def _record(body):
    """Bodies that are not JSON objects carry no fields."""
    return body if isinstance(body, dict) else {}


def _single(resource, operation, key, result):
    """Turn an empty result into NotFound; otherwise keep the result as is."""
    if isinstance(result, Success) and not result.rows:
        return Failure(ErrorKind.NOT_FOUND, resource.not_found_message(operation, key))
    return result


def build_router(resource) -> APIRouter:
    """Build the list/get/create/replace/delete routes for one resource."""
    router = APIRouter(prefix=f"/{resource.path}", tags=[resource.summary or resource.path])

    if resource.has_date_range:
        # Registered before "/{key}" so the literal path wins
        @router.get("/fechas/rango", response_model=DateRangeResponse)
        def date_range(store: Store = Depends(get_store)):
            result = store.execute(queries.select_date_range(resource))
            if isinstance(result, Failure):
                return _error(resource, "date_range", result)
            row = result.rows[0] if result.rows else {}
            return DateRangeResponse(**row)

        @router.get("")
        def list_rows(
            desde: Optional[str] = Query(None),
            hasta: Optional[str] = Query(None),
            store: Store = Depends(get_store),
        ):
            result = store.execute(queries.select_all(resource, desde, hasta))
            if isinstance(result, Failure):
                return _error(resource, "list", result)
            return _json(result.rows)
    else:
        @router.get("")
        def list_rows(store: Store = Depends(get_store)):
            result = store.execute(queries.select_all(resource))
            if isinstance(result, Failure):
                return _error(resource, "list", result)
            return _json(result.rows)

    @router.get("/{key}")
    def get_row(key: str, store: Store = Depends(get_store)):
        result = _single(resource, "get", key, store.execute(queries.select_one(resource, key)))
        if isinstance(result, Failure):
            return _error(resource, "get", result)
        return _json(result.rows[0])

    @router.post("", status_code=201)
    def create_row(body: Any = Body(None), store: Store = Depends(get_store)):
        result = store.execute(queries.insert_row(resource, _record(body)))
        if isinstance(result, Failure):
            return _error(resource, "create", result)
        return _json(result.rows[0], status_code=201)

    @router.put("/{key}")
    def replace_row(key: str, body: Any = Body(None), store: Store = Depends(get_store)):
        result = _single(resource, "update", key, store.execute(queries.update_row(resource, key, _record(body))))
        if isinstance(result, Failure):
            return _error(resource, "update", result)
        return _json(result.rows[0])

    @router.delete("/{key}")
    def delete_row(key: str, store: Store = Depends(get_store)):
        result = _single(resource, "delete", key, store.execute(queries.delete_row(resource, key)))
        if isinstance(result, Failure):
            return _error(resource, "delete", result)
        content = {"message": resource.deleted_message(key)}
        if resource.deleted_key:
            content[resource.deleted_key] = result.rows[0]
        return _json(content)

    return router
