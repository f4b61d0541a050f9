from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes.show_notes import router as show_notes_router

app = FastAPI(
    title="Show Notes API",
    description="Two-pass Gemini show notes from podcast transcripts",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
    ],
    allow_origin_regex=r"https://.*\.vercel\.app|http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(show_notes_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
