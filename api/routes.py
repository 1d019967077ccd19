# api/routes.py
from fastapi import APIRouter, Depends

from config.settings import settings
from core.handler import handle
from services.dataset_store import DatasetStore
from services.reference_service import ReferenceService

router = APIRouter()


def app_information() -> dict:
    """Metadata served by the app information endpoint."""
    return {
        "name": settings.API_TITLE,
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION,
        "endpoints": [route.path for route in router.routes],
    }


def get_dataset_store() -> DatasetStore:
    return DatasetStore(settings.DATA_DIR)


def get_reference_service(store: DatasetStore = Depends(get_dataset_store)) -> ReferenceService:
    return ReferenceService(store, app_info=app_information)


@router.get("/")
async def app_info(service: ReferenceService = Depends(get_reference_service)):
    """App name, version and available endpoints."""
    return await handle(service.get_app_information, send="raw")


@router.get("/lg")
async def life_is_good(service: ReferenceService = Depends(get_reference_service)):
    return await handle(service.life_is_good, send="raw")


@router.get("/users")
async def app_users(service: ReferenceService = Depends(get_reference_service)):
    return await handle(service.get_app_users)


@router.get("/github/users")
async def github_users(service: ReferenceService = Depends(get_reference_service)):
    return await handle(service.get_github_users)


@router.get("/countries")
async def countries(service: ReferenceService = Depends(get_reference_service)):
    return await handle(service.get_countries)


@router.get("/countries/states")
async def countries_and_states(service: ReferenceService = Depends(get_reference_service)):
    return await handle(service.get_countries_and_states)


@router.get("/countries/states/cities")
async def countries_states_and_cities(service: ReferenceService = Depends(get_reference_service)):
    return await handle(service.get_countries_states_and_cities)
