from fastapi import APIRouter, status

health_router = APIRouter(tags=["Health"])


# Liveness only, the store is not consulted
@health_router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "OK"}
