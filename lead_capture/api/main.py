from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lead_capture import __version__
from lead_capture.api.routes import leads

app = FastAPI(
    title="Lead Capture API",
    description="Trade-show lead capture: rows in Google Sheets, photos in Google Drive.",
    version=__version__,
)

# The capture page is a static file served from anywhere (or opened from disk)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(leads.router, tags=["Leads"])

if __name__ == "__main__":
    import uvicorn
    from lead_capture.api.dependencies import get_settings

    settings = get_settings()
    uvicorn.run("lead_capture.api.main:app", host=settings.host, port=settings.port)
