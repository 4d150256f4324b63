"""Reader catalog endpoints."""
from fastapi import APIRouter, Depends
from pentopublic.api.deps import get_catalog_service
from pentopublic.api.schemas.catalog import CatalogBook
from pentopublic.services.catalog_service import CatalogService

router = APIRouter(prefix="/books", tags=["catalog"])


@router.get("/with-files", response_model=list[CatalogBook])
def list_books(svc: CatalogService = Depends(get_catalog_service)) -> list[CatalogBook]:
    return svc.list_published()


@router.get("/top", response_model=list[CatalogBook])
def list_top_books(svc: CatalogService = Depends(get_catalog_service)) -> list[CatalogBook]:
    return svc.list_top()
