import json
import logging
import os

from app.services.errors import StorageFailure

logger = logging.getLogger(__name__)


class JsonDocument:
    """
    One flat JSON file holding a whole document.

    Every load reads the full file and every save rewrites it. There is no
    locking: two writers doing load/modify/save at the same time can drop
    one another's update.
    """

    def __init__(self, data_dir, filename, default=dict):
        self.data_dir = data_dir
        self.filename = filename
        self.default = default

    @property
    def path(self):
        return os.path.join(self.data_dir, self.filename)

    def load(self):
        """Read the document. Missing or corrupt files come back empty."""
        try:
            with open(self.path, encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error reading %s: %s", self.filename, e)
            return self.default()

        if not isinstance(data, self.default):
            logger.error("Unexpected top-level type in %s: %s", self.filename, type(data).__name__)
            return self.default()
        return data

    def save(self, data):
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError) as e:
            logger.error("Error writing to %s: %s", self.filename, e)
            raise StorageFailure(f"Failed to write {self.filename}") from e
