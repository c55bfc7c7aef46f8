import random
from datetime import datetime, timezone

INTERVIEW_COVERS = [
    "/adobe.png",
    "/amazon.png",
    "/facebook.png",
    "/hostinger.png",
    "/pinterest.png",
    "/quora.png",
    "/reddit.png",
    "/skype.png",
    "/spotify.png",
    "/telegram.png",
    "/tiktok.png",
    "/yahoo.png",
]

def get_random_interview_cover() -> str:
    """Pick a cover image path for a newly generated interview"""
    return f"/covers{random.choice(INTERVIEW_COVERS)}"

def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
