from fastapi import APIRouter

from insyd_notify.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/")
async def root() -> dict[str, object]:
    return {"ok": True, "service": get_settings().app_name}
