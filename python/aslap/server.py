import io
import os

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse

from .config import DelayParameters
from .copier import pace
from .durations import format_duration
from .patience import be_patient_with, code_point
from .runes import iter_runes

HOST = os.getenv("ASLAP_HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", 8000))

app = FastAPI(title="aslap")


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SlowRequest(DelayParameters):
    text: str


def _source(req: SlowRequest) -> io.BytesIO:
    return io.BytesIO(req.text.encode("utf-8"))


@app.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    return "ok"


@app.post("/api/slow/stream")
async def api_stream(req: SlowRequest):
    """
    Streams req.text back one character at a time, paced like the CLI.
    The generator is sync, so Starlette drives it from its threadpool.
    """
    patience = be_patient_with(req)
    return StreamingResponse(pace(_source(req), patience), media_type="text/plain; charset=utf-8")


@app.post("/api/slow/delays")
async def api_delays(req: SlowRequest):
    """
    Debug view: the delay every character would get, without waiting for any.
    """
    try:
        patience = be_patient_with(req)
        result = []
        for ch, _ in iter_runes(_source(req)):
            delay = patience(ch)
            result.append({
                "char": ch,
                "code_point": code_point(ch),
                "delay": delay,
                "duration": format_duration(delay),
            })
        return JSONResponse(content={"status": "ok", "result": result})
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


def main():
    print(f"aslap server listening on http://{HOST}:{PORT}")
    uvicorn.run("aslap.server:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
