"""
Item API endpoints (admin-only).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import policy

from . import schemas, service

router = APIRouter()


@router.get("/items")
async def list_items(_: dict = Depends(policy.guard("items", "list"))) -> dict:
    return await service.list_items()


@router.post("/items")
async def create_item(
    request: schemas.ItemCreate,
    _: dict = Depends(policy.guard("items", "create")),
) -> dict:
    return await service.create_item(request)


@router.get("/items/{item_id}")
async def get_item(
    item_id: int,
    _: dict = Depends(policy.guard("items", "get")),
) -> dict:
    return await service.get_item(item_id)


@router.put("/items/{item_id}")
async def update_item(
    item_id: int,
    request: schemas.ItemUpdate,
    _: dict = Depends(policy.guard("items", "update")),
) -> dict:
    return await service.update_item(item_id, request)


@router.delete("/items/{item_id}")
async def delete_item(
    item_id: int,
    _: dict = Depends(policy.guard("items", "delete")),
) -> dict:
    return await service.delete_item(item_id)
