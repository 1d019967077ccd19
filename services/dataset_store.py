# services/dataset_store.py
import json
import logging
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

DATASETS = (
    "app_users",
    "github_users",
    "countries",
    "countries_states",
    "countries_states_cities",
)


class DatasetError(Exception):
    """A reference dataset could not be loaded."""


class DatasetStore:
    """Reads the static reference datasets (<data_dir>/<name>.json)."""

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        if name not in DATASETS:
            raise DatasetError(f"Unknown dataset: {name}")
        return self.data_dir / f"{name}.json"

    def load(self, name: str) -> Any:
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            raise DatasetError(f"Dataset {name} is unavailable") from e
        except json.JSONDecodeError as e:
            logger.error("Failed to parse %s: %s", path, e)
            raise DatasetError(f"Dataset {name} is not valid JSON") from e
