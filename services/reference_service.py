# services/reference_service.py
import json
import logging
from typing import Callable, Dict, Optional

from core.response import ok, error
from models.envelope import Envelope
from services.dataset_store import DatasetStore

logger = logging.getLogger(__name__)

COUNTRIES_MESSAGE = "Countries data successfully returned."
LIFE_IS_GOOD = "Life is good!"


class ReferenceService:
    """Data accessors for the reference endpoints.

    Each accessor returns an envelope; any failure while loading is converted
    into an error envelope with the accessor's own code/message.
    """

    def __init__(self, store: DatasetStore, app_info: Optional[Callable[[], Dict]] = None):
        self.store = store
        self.app_info = app_info or dict

    async def get_app_users(self) -> Envelope:
        try:
            return ok(self.store.load("app_users"))
        except Exception as e:
            logger.warning("Failed to load app users: %s", e)
            return error("An error occurred!")

    async def get_github_users(self) -> Envelope:
        try:
            return ok(self.store.load("github_users"))
        except Exception as e:
            logger.warning("Failed to load github users: %s", e)
            return error(json.dumps({"error": type(e).__name__, "detail": str(e)}))

    async def get_countries(self) -> Envelope:
        try:
            data = self.store.load("countries")
            return ok({"code": 200, "message": COUNTRIES_MESSAGE, "data": data})
        except Exception as e:
            logger.warning("Failed to load countries: %s", e)
            return error("Conflict!", 409)

    async def get_countries_and_states(self) -> Envelope:
        try:
            return ok(self.store.load("countries_states"))
        except Exception as e:
            logger.warning("Failed to load countries/states: %s", e)
            return error("Server Error", 500)

    async def get_countries_states_and_cities(self) -> Envelope:
        try:
            return ok(self.store.load("countries_states_cities"))
        except Exception as e:
            logger.warning("Failed to load countries/states/cities: %s", e)
            return error()

    async def get_app_information(self) -> Envelope:
        try:
            return ok(self.app_info())
        except Exception as e:
            logger.warning("Failed to build app information: %s", e)
            return error()

    async def life_is_good(self) -> Envelope:
        return ok(LIFE_IS_GOOD)
