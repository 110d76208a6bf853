"""
Acceso a la colección de mascotas en MongoDB (Motor).

Los handlers solo hablan con PetStore; así los tests pueden inyectar otro store.
PUT y PATCH usan operaciones distintas: replace_by_id borra los campos que no
vienen en el payload, merge_by_id los conserva.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ReturnDocument

from .db import get_db


def utcnow() -> datetime:
    # MongoDB guarda milisegundos; recortamos para que lo devuelto coincida con lo guardado
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class PetStore:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def is_valid_id(value: Any) -> bool:
        return isinstance(value, str) and ObjectId.is_valid(value)

    async def create_one(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        now = utcnow()
        doc = {k: v for k, v in fields.items() if v is not None}
        doc["createdAt"] = now
        doc["updatedAt"] = now
        res = await self.collection.insert_one(doc)
        doc["_id"] = res.inserted_id
        return doc

    async def find_many(self, skip: int, limit: int) -> List[Dict[str, Any]]:
        cursor = self.collection.find().sort("_id", 1).skip(skip).limit(limit)
        return await cursor.to_list(length=limit)

    async def count_all(self) -> int:
        return await self.collection.count_documents({})

    async def find_by_id(self, pet_id: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": ObjectId(pet_id)})

    async def replace_by_id(self, pet_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        doc = {k: v for k, v in fields.items() if v is not None}
        # pipeline de una sola operación: conserva _id y createdAt, sustituye el resto
        pipeline = [
            {
                "$replaceWith": {
                    "$mergeObjects": [
                        {"_id": "$_id", "createdAt": "$createdAt"},
                        {"$literal": doc},
                        {"updatedAt": utcnow()},
                    ]
                }
            }
        ]
        return await self.collection.find_one_and_update(
            {"_id": ObjectId(pet_id)},
            pipeline,
            return_document=ReturnDocument.AFTER,
        )

    async def merge_by_id(self, pet_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        to_set = {k: v for k, v in fields.items() if v is not None}
        to_set["updatedAt"] = utcnow()
        update: Dict[str, Any] = {"$set": to_set}
        to_unset = {k: "" for k, v in fields.items() if v is None}
        if to_unset:
            update["$unset"] = to_unset
        return await self.collection.find_one_and_update(
            {"_id": ObjectId(pet_id)},
            update,
            return_document=ReturnDocument.AFTER,
        )

    async def delete_by_id(self, pet_id: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one_and_delete({"_id": ObjectId(pet_id)})


async def get_pet_store(db: AsyncIOMotorDatabase = Depends(get_db)) -> PetStore:
    return PetStore(db.pets)
