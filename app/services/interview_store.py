import logging
from typing import Any, Dict

from app.core.firebase import get_firestore_client

logger = logging.getLogger(__name__)

class InterviewStore:
    """Writes generated interviews to one Firestore collection"""

    def __init__(self, db=None, collection: str = "interviews"):
        self._db = db
        self.collection = collection

    @property
    def db(self):
        # Resolved on first write so requests rejected up front never touch Firebase
        if self._db is None:
            self._db = get_firestore_client()
        return self._db

    def add(self, record: Dict[str, Any]) -> str:
        """Insert ``record`` as a new document and return its id"""
        _, doc_ref = self.db.collection(self.collection).add(record)
        logger.info(f"Saved interview {doc_ref.id} to '{self.collection}'")
        return doc_ref.id
