"""
Enumerations shared by models, schemas and services.
"""
from enum import Enum


class Platform(str, Enum):
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"


class ContentType(str, Enum):
    POST = "post"
    STORY = "story"
    REEL = "reel"
    TWEET = "tweet"


class ContentStatus(str, Enum):
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"


class StepType(str, Enum):
    GENERATION = "generation"
    REVIEW = "review"
    APPROVAL = "approval"
    SCHEDULING = "scheduling"


class InstanceStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    FUNNY = "funny"
    INSPIRATIONAL = "inspirational"
    PROMOTIONAL = "promotional"


DEFAULT_REJECTION_REASON = "No reason provided"
