"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from lecture_scribe.routes import notes_router

patch_all()

app = FastAPI(title="Lecture Scribe")
app.include_router(notes_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
