from datetime import datetime, timezone
from typing import List, Optional

from config.log_config import get_logger
from services.seed_service import ensure_seed
from services.storage_service import StorageService, RESUMES_KEY
from utils.ids import parse_iso

logger = get_logger("Resume_Repository")

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _updated_at(resume: dict) -> datetime:
    return parse_iso(resume.get("updatedAt")) or _OLDEST


class ResumeRepository:
    """CRUD over the resume collection, which is stored as one JSON list.

    Nothing is cached between calls; every operation reads the collection
    fresh and every write persists the whole list.
    """

    def __init__(self, storage: StorageService):
        self.storage = storage

    # The collection exactly as stored, entries the UI may not recognise included
    def stored(self) -> List:
        ensure_seed(self.storage)
        resumes = self.storage.read_json(RESUMES_KEY, [])
        if not isinstance(resumes, list):
            logger.warning("Stored resume collection is not a list, ignoring it")
            return []
        return resumes

    def all(self) -> List[dict]:
        return [r for r in self.stored() if isinstance(r, dict)]

    def save_all(self, resumes: List) -> None:
        self.storage.write_json(RESUMES_KEY, resumes)

    # most recent first, stable for equal timestamps
    def list(self) -> List[dict]:
        return sorted(self.all(), key=_updated_at, reverse=True)

    def find(self, resume_id: str) -> Optional[dict]:
        for resume in self.all():
            if resume.get("_id") == resume_id:
                return resume
        return None

    # Writes touch only the target entry, anything else is written back as found
    def upsert(self, resume: dict) -> None:
        resumes = self.stored()
        for idx, current in enumerate(resumes):
            if isinstance(current, dict) and current.get("_id") == resume.get("_id"):
                resumes[idx] = resume
                break
        else:
            resumes.append(resume)
        self.save_all(resumes)

    def remove(self, resume_id: str) -> None:
        resumes = self.stored()
        remaining = [
            r for r in resumes
            if not (isinstance(r, dict) and r.get("_id") == resume_id)
        ]
        if len(remaining) == len(resumes):
            logger.debug(f"Resume {resume_id} not found, nothing to delete")
        self.save_all(remaining)
