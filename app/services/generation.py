"""
Template-based content generation.

Produces a draft title, caption and hashtag line from a prompt. There is no
model behind this; captions come from fixed per-tone sentences and are cut
to the platform's caption limit.
"""
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from ..constants import ContentStatus
from ..logging_config import get_logger
from ..models.content import Content
from .users import require_user

logger = get_logger("generation")

CAPTION_LIMITS: Dict[str, int] = {
    "instagram": 2200,
    "facebook": 63206,
    "twitter": 280,
    "linkedin": 3000,
}

TONE_CAPTIONS: Dict[str, str] = {
    "professional": "Professional content addressing: {prompt}. This content maintains a business-appropriate tone while engaging the audience.",
    "casual": "Hey there! Let's talk about {prompt}. This is a casual take on the topic that feels approachable and friendly.",
    "funny": "You know what's interesting about {prompt}? Here's a fun perspective that'll make you smile! 😄",
    "inspirational": "{prompt} - let this inspire your journey today. Every step forward matters, and this content aims to motivate and uplift.",
    "promotional": "Don't miss out on {prompt}! This amazing opportunity is perfect for you. Take action today!",
}

DEFAULT_CAPTION = "Generated content for: {prompt}"

CONTENT_TYPE_HASHTAGS: Dict[str, List[str]] = {
    "post": ["#post", "#engagement"],
    "story": ["#story", "#behind-the-scenes"],
    "reel": ["#reel", "#video", "#trending"],
    "tweet": ["#tweet", "#discussion"],
}

# casual has no tone tags
TONE_HASHTAGS: Dict[str, List[str]] = {
    "professional": ["#business", "#professional"],
    "inspirational": ["#motivation", "#inspiration"],
    "funny": ["#humor", "#fun"],
    "promotional": ["#offer", "#promotion"],
}


def build_caption(prompt: str, platform: str, tone: Optional[str] = None) -> str:
    template = TONE_CAPTIONS.get(tone, DEFAULT_CAPTION)
    caption = template.format(prompt=prompt)

    limit = CAPTION_LIMITS[platform]
    if len(caption) > limit:
        caption = caption[: limit - 3] + "..."
    return caption


def build_hashtags(platform: str, content_type: str, tone: Optional[str] = None) -> str:
    tags = ["#content", "#social", f"#{platform}"]
    tags.extend(CONTENT_TYPE_HASHTAGS.get(content_type, []))
    if tone:
        tags.extend(TONE_HASHTAGS.get(tone, []))
    tags.extend(["#ai", "#generated"])
    return " ".join(tags)


def render_draft(
    prompt: str,
    platform: str,
    content_type: str,
    include_hashtags: bool = True,
    tone: Optional[str] = None,
) -> Tuple[str, str, Optional[str]]:
    """Return (title, caption, hashtags) for a generation request."""
    title = f"{content_type.capitalize()} for {platform.capitalize()}"
    caption = build_caption(prompt, platform, tone)
    hashtags = build_hashtags(platform, content_type, tone) if include_hashtags else None
    return title, caption, hashtags


def generate_content(
    db: Session,
    user_id: int,
    prompt: str,
    platform: str,
    content_type: str,
    include_hashtags: bool = True,
    tone: Optional[str] = None,
) -> Content:
    require_user(db, user_id)

    title, caption, hashtags = render_draft(prompt, platform, content_type, include_hashtags, tone)
    content = Content(
        user_id=user_id,
        title=title,
        caption=caption,
        hashtags=hashtags,
        platform=platform,
        content_type=content_type,
        status=ContentStatus.DRAFT.value,
        ai_generated=True,
    )
    db.add(content)
    db.commit()
    db.refresh(content)

    logger.info(
        "Content generated",
        content_id=content.id,
        user_id=user_id,
        platform=platform,
        tone=tone,
    )
    return content
