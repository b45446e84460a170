"""File-to-file upscale pipeline."""
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union

from upscale.io import load_image_rgba, save_image
from upscale.options import DEFAULT_JPEG_QUALITY, Options, default_options
from upscale.resample import resolve_algorithm
from upscale.scale import by_factor

logger = logging.getLogger(__name__)


def _append_jsonl(log_jsonl: Path, record: Dict[str, Any]) -> None:
    log_jsonl.parent.mkdir(parents=True, exist_ok=True)
    with open(log_jsonl, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


def process_one(
    src: Union[str, Path],
    dst: Union[str, Path],
    factor: float = 2.0,
    options: Optional[Options] = None,
    quality: int = DEFAULT_JPEG_QUALITY,
    log_jsonl: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Upscale a single image file and save the result.

    Pipeline steps:
    1. Load image (converted to RGBA)
    2. Scale by factor with the selected kernel
    3. Save as JPEG (.jpg/.jpeg) or PNG (anything else)
    4. Optionally append a JSON line describing the run

    On failure an error record is logged (if log_jsonl is given) and the
    original exception is re-raised.

    Args:
        src: Source image path
        dst: Destination image path
        factor: Scale factor; non-positive values mean 1
        options: Upscale options (default: Catmull-Rom)
        quality: JPEG quality, used only for JPEG destinations
        log_jsonl: Optional path to log JSONL file

    Returns:
        Dictionary with processing metadata
    """
    options = options or default_options()
    try:
        pil = load_image_rgba(src)
        meta: Dict[str, Any] = {
            "src": str(src),
            "w": pil.width,
            "h": pil.height,
            "algorithm": resolve_algorithm(options.algorithm).value,
            "factor": factor,
        }

        pil = by_factor(pil, factor, options)
        save_image(pil, dst, quality)
    except Exception as e:
        if log_jsonl:
            _append_jsonl(Path(log_jsonl), {
                "src": str(src),
                "error": str(e),
                "ok": False
            })
        raise

    meta.update({
        "dst": str(dst),
        "ok": True,
        "final_w": pil.width,
        "final_h": pil.height
    })
    logger.info(
        "Upscaled %s (%dx%d) -> %s (%dx%d)",
        src, meta["w"], meta["h"], dst, pil.width, pil.height
    )

    if log_jsonl:
        _append_jsonl(Path(log_jsonl), meta)

    return meta
