from datetime import datetime, timezone
from typing import Annotated

from fastapi import Depends


def get_now() -> datetime:
    """Current instant; overridden in tests to pin the business clock."""
    return datetime.now(timezone.utc)


Now = Annotated[datetime, Depends(get_now)]
