# petcare/routers/pets.py
import asyncio
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from ..errors import InvalidPetIdentifier, PetNotFound, PetValidationError
from ..logger import PetLogger, get_pet_logger
from ..store import PetStore, get_pet_store
from ..utils import format_pet, resolve_pagination, total_pages
from ..validation import clean_pet_payload, validate_pet_payload

router = APIRouter()

EMPTY_BODY = "Request body must not be empty."

# ---------- Utilidades ----------

def _check_id(store: PetStore, pet_id: str, log: PetLogger, action: str) -> None:
    if not store.is_valid_id(pet_id):
        log.warn(f"Invalid pet identifier received{action}.", {"id": pet_id})
        raise InvalidPetIdentifier()

def _validated(payload: Any, partial: bool = False) -> dict:
    errors = validate_pet_payload(payload, partial=partial)
    if errors:
        raise PetValidationError(errors)
    return clean_pet_payload(payload)

# ---------- Endpoints ----------

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_pet(
    payload: Any = Body(None),
    store: PetStore = Depends(get_pet_store),
    log: PetLogger = Depends(get_pet_logger),
):
    fields = _validated({} if payload is None else payload)
    doc = await store.create_one(fields)
    data = format_pet(doc)
    log.success("Pet created successfully.", {
        "id": data["id"],
        "name": data["name"],
        "species": data["species"],
    })
    return {"message": "Pet created successfully.", "data": data}

@router.get("")
async def list_pets(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: PetStore = Depends(get_pet_store),
    log: PetLogger = Depends(get_pet_logger),
):
    page_n, limit_n, skip = resolve_pagination(page, limit)
    # página y total en paralelo, no dependen uno del otro
    items, total = await asyncio.gather(
        store.find_many(skip, limit_n),
        store.count_all(),
    )
    log.info("Pet listing retrieved.", {
        "count": len(items),
        "total": total,
        "page": page_n,
        "limit": limit_n,
    })
    return {
        "message": "Pets retrieved successfully.",
        "data": [format_pet(d) for d in items],
        "pagination": {
            "page": page_n,
            "limit": limit_n,
            "total": total,
            "pages": total_pages(total, limit_n),
        },
    }

@router.get("/{pet_id}")
async def get_pet(
    pet_id: str,
    store: PetStore = Depends(get_pet_store),
    log: PetLogger = Depends(get_pet_logger),
):
    _check_id(store, pet_id, log, "")
    doc = await store.find_by_id(pet_id)
    if not doc:
        log.warn("Pet not found when fetching.", {"id": pet_id})
        raise PetNotFound()
    log.info("Pet retrieved successfully.", {"id": pet_id})
    return {"message": "Pet retrieved successfully.", "data": format_pet(doc)}

@router.put("/{pet_id}")
async def replace_pet(
    pet_id: str,
    payload: Any = Body(None),
    store: PetStore = Depends(get_pet_store),
    log: PetLogger = Depends(get_pet_logger),
):
    _check_id(store, pet_id, log, " for full update")
    fields = _validated({} if payload is None else payload)
    doc = await store.replace_by_id(pet_id, fields)
    if not doc:
        log.warn("Pet not found when attempting full update.", {"id": pet_id})
        raise PetNotFound()
    log.success("Pet replaced successfully.", {"id": pet_id})
    return {"message": "Pet updated successfully.", "data": format_pet(doc)}

@router.patch("/{pet_id}")
async def patch_pet(
    pet_id: str,
    payload: Any = Body(None),
    store: PetStore = Depends(get_pet_store),
    log: PetLogger = Depends(get_pet_logger),
):
    _check_id(store, pet_id, log, " for partial update")
    if payload is None or payload == {}:
        raise PetValidationError([EMPTY_BODY])
    fields = _validated(payload, partial=True)
    doc = await store.merge_by_id(pet_id, fields)
    if not doc:
        log.warn("Pet not found when attempting partial update.", {"id": pet_id})
        raise PetNotFound()
    log.success("Pet updated successfully.", {"id": pet_id, "changes": list(fields)})
    return {"message": "Pet updated successfully.", "data": format_pet(doc)}

@router.delete("/{pet_id}")
async def delete_pet(
    pet_id: str,
    store: PetStore = Depends(get_pet_store),
    log: PetLogger = Depends(get_pet_logger),
):
    _check_id(store, pet_id, log, " for delete")
    doc = await store.delete_by_id(pet_id)
    if not doc:
        log.warn("Pet not found when attempting delete.", {"id": pet_id})
        raise PetNotFound()
    log.success("Pet deleted successfully.", {"id": pet_id})
    return {"message": "Pet deleted successfully."}
