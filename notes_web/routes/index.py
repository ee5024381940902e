from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from sqlalchemy import text

from notes_web.dependencies import DbDep, RootDataDep
from notes_web.document import render_document

router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="Landing page")
async def index(request: Request, root: RootDataDep):
    return render_document(request, "pages/index.html", {}, root)


# Root Health Check
@router.get("/healthcheck", summary="Health Check", tags=["General"])
def health_check(db: DbDep):
    """Simple health check endpoint; also verifies the database answers."""
    db.execute(text("SELECT 1"))
    return {"message": "Healthy"}
