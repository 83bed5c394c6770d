import logging

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from analysis_pipeline import compute_metrics, score_metrics
from config import FRONTEND_ORIGINS, HOST, LOG_LEVEL, MAX_TRANSCRIPT_CHARS, PORT

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Interview Response Analyzer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AnalyzeRequest(BaseModel):
    transcript: str
    include_metrics: bool = False


# --- 🩺 HEALTH ---


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


# --- 🧠 ANALYZE ENDPOINT ---


@app.post("/analyze")
def analyze(request: AnalyzeRequest):
    """
    Analyze a finished transcript produced by whatever speech-to-text
    source the client uses. Blank transcripts are refused, like the
    recorder UI which only analyzes once something was heard.
    """
    transcript = request.transcript
    if not transcript.strip():
        raise HTTPException(status_code=400, detail="Transcript is empty.")
    if len(transcript) > MAX_TRANSCRIPT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Transcript too long. Max length is {MAX_TRANSCRIPT_CHARS} characters.",
        )

    try:
        metrics = compute_metrics(transcript)
        result = score_metrics(metrics)
        payload = result.to_dict()
        if request.include_metrics:
            payload["metrics"] = metrics.to_dict()
    except Exception:
        logger.exception("Analysis failed for transcript of %d characters", len(transcript))
        return JSONResponse({"error": "Failed to analyze transcript"}, status_code=500)

    logger.info(
        "Analyzed %d characters: score=%s suggestions=%d",
        len(transcript),
        result.clarity_score,
        len(result.suggestions),
    )
    return JSONResponse(payload)


if __name__ == "__main__":
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
