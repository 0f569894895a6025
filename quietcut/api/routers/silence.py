"""Silence analysis and removal endpoints."""

from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from quietcut.audio.types import SampleBuffer
from quietcut.audio.wav_encoder import WAV_CONTENT_TYPE

from ..schemas import AnalyzeResponse, ProcessingStatsResponse, ProcessResponse, SilenceRegionModel
from ..services.silence_service import (
    DecodeError,
    ProcessResult,
    SilenceService,
    UnsupportedMediaError,
    UploadTooLargeError,
)
from ..settings import APISettings, get_settings

router = APIRouter(prefix="/v1", tags=["silence"])


def get_service(settings: APISettings = Depends(get_settings)) -> SilenceService:
    return SilenceService(settings)


def _check_min_duration(value: float | None) -> None:
    if value is not None and value < 0:
        raise HTTPException(status_code=422, detail="min_duration must be >= 0")


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""
    fallback = "".join(
        char if char.isascii() and char.isprintable() and char not in '"\\' else "_" for char in filename
    )
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


async def read_upload(file: UploadFile, limit: int) -> bytes:
    """Read at most ``limit + 1`` bytes so oversized bodies are never buffered whole."""
    if file.size is not None and file.size > limit:
        raise UploadTooLargeError(f"Upload exceeds {limit} byte limit")
    return await file.read(limit + 1)


async def _load(service: SilenceService, file: UploadFile) -> SampleBuffer:
    try:
        data = await read_upload(file, service.settings.max_upload_bytes)
        return await run_in_threadpool(service.load, data, file.filename, file.content_type)
    except UnsupportedMediaError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc
    except UploadTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc
    except DecodeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


async def _process(
    service: SilenceService, file: UploadFile, min_duration: float | None, *, encode: bool = True
) -> ProcessResult:
    _check_min_duration(min_duration)
    buffer = await _load(service, file)
    return await run_in_threadpool(
        service.process, buffer, min_duration, filename=file.filename, encode=encode
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_audio(
    file: UploadFile = File(...),
    min_duration: float | None = Form(None),
    service: SilenceService = Depends(get_service),
):
    _check_min_duration(min_duration)
    buffer = await _load(service, file)
    regions = await run_in_threadpool(service.analyze, buffer, min_duration)
    return AnalyzeResponse(
        sample_rate=buffer.sample_rate,
        channels=buffer.number_of_channels,
        duration=buffer.duration,
        min_duration=service.settings.min_silence_sec if min_duration is None else min_duration,
        regions=[SilenceRegionModel.from_region(region) for region in regions],
        silence_total=sum(region.duration for region in regions),
    )


@router.post("/process")
async def process_audio(
    file: UploadFile = File(...),
    min_duration: float | None = Form(None),
    service: SilenceService = Depends(get_service),
):
    result = await _process(service, file, min_duration)
    stats = result.stats
    headers = {
        "Content-Disposition": content_disposition(result.filename),
        "X-Old-Duration": f"{stats.old_duration:.6f}",
        "X-New-Duration": f"{stats.new_duration:.6f}",
        "X-Time-Saved": f"{stats.time_saved:.6f}",
        "X-Processing-Time": f"{stats.processing_time:.6f}",
        "X-Silence-Regions": str(len(result.regions)),
    }
    return Response(content=result.wav, media_type=WAV_CONTENT_TYPE, headers=headers)


@router.post("/process/stats", response_model=ProcessResponse)
async def process_stats(
    file: UploadFile = File(...),
    min_duration: float | None = Form(None),
    service: SilenceService = Depends(get_service),
):
    result = await _process(service, file, min_duration, encode=False)
    return ProcessResponse(
        filename=result.filename,
        stats=ProcessingStatsResponse.from_stats(result.stats),
        regions=[SilenceRegionModel.from_region(region) for region in result.regions],
    )
