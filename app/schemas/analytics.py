from pydantic import BaseModel
from typing import Dict


class ContentAnalytics(BaseModel):
    total_content: int
    ai_generated_content: int
    approved_content: int
    rejected_content: int
    scheduled_content: int
    published_content: int
    by_platform: Dict[str, int]
    by_status: Dict[str, int]
