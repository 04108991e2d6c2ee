from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/")
def root():
    return {"message": "Welcome to the IT inventory API"}


@router.get("/api/health")
def health():
    return {"status": "ok"}
