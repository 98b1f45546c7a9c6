from abc import ABC, abstractmethod
from typing import List
from ..models.review import Review


class ReviewRepository(ABC):
    """Repository interface - defines contract for review data access"""

    @abstractmethod
    async def create(self, review: Review) -> Review:
        """Create a new review, assigning its ID and creation time"""
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[Review]:
        """List the most recent reviews, newest first"""
        pass
