"""
Shared field types and the write acknowledgements returned by mutating
routes.

The frontend reads the MongoDB driver's result objects directly
(``insertedId``, ``modifiedCount``, ``deletedCount`` ...), so these
models keep the driver's field names in camelCase.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator


def _reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise be coerced to 1.0/0.0.
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


# Monetary amount in major units.  Numbers and numeric strings are accepted.
Price = Annotated[float, BeforeValidator(_reject_bool)]


def _id_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: str

    @classmethod
    def from_driver(cls, result: Any) -> "InsertResult":
        return cls(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedId: Optional[str] = None
    upsertedCount: int = 0

    @classmethod
    def from_driver(cls, result: Any) -> "UpdateResult":
        upserted_id = _id_str(result.upserted_id)
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedId=upserted_id,
            upsertedCount=1 if upserted_id is not None else 0,
        )


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int = 0

    @classmethod
    def from_driver(cls, result: Any) -> "DeleteResult":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)
