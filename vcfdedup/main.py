import io
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, StreamingResponse
from fastapi.templating import Jinja2Templates

from .errors import VCardFormatError
from .utils import CRLF
from .vcards import dedupe_vcf_with_stats

app = FastAPI()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "index.html")

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.post("/upload")
async def upload(file: UploadFile):
    data = await file.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail=f"vCard file is not valid UTF-8: {e}")
    try:
        vcf_text, stats = dedupe_vcf_with_stats(text, newline=CRLF)
    except VCardFormatError as e:
        raise HTTPException(status_code=400, detail=f"Invalid vCard file: {e}")
    # Derive download filename from uploaded file
    base = (file.filename or "contacts").rsplit("/", 1)[-1].rsplit("\\", 1)[-1]
    if base.lower().endswith('.vcf'):
        base = base[:-4]
    out_name = f"{base}-dedup.vcf"
    return StreamingResponse(
        io.BytesIO(vcf_text.encode("utf-8")),
        media_type="text/vcard; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename={out_name}",
            "X-Records-In": str(stats["records_in"]),
            "X-Records-Out": str(stats["records_out"]),
            "X-Records-Dropped": str(stats["dropped"]),
        },
    )
