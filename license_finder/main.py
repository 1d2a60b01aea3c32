from fastapi import FastAPI
from license_finder import __version__
from license_finder.api.analysis import router as analysis_router

app = FastAPI(
    title="License Finder",
    version=__version__,
)

# main API
app.include_router(analysis_router, prefix="/api", tags=["Analysis"])


# quick health check
@app.get("/")
def root():
    return {"message": "License Finder backend is running"}
