import os
import re
import io
import json
import uuid
import time
import base64
import binascii
import threading
from datetime import datetime
from typing import List, Dict, Any, Optional

from PIL import Image, UnidentifiedImageError
from werkzeug.utils import secure_filename
from flask import current_app

MIME_BY_EXT = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}
EXT_BY_FORMAT = {"JPEG": "jpg", "PNG": "png", "WEBP": "webp"}


def fnum(x, default=0.0) -> float:
    """Convert various formats to float, with regex extraction for strings"""
    if isinstance(x, bool):
        return float(default)
    if isinstance(x, (int, float)):
        return float(x)
    if isinstance(x, str):
        s = x.replace(",", "").strip()
        m = re.search(r"[-+]?\d+(\.\d+)?", s)
        if m:
            try:
                return float(m.group(0))
            except Exception:
                pass
    return float(default)


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, x))


def mime_for_path(path: str) -> str:
    return MIME_BY_EXT.get(os.path.splitext(path)[1].lower(), "image/jpeg")


# ---------- JSON extraction from model replies ----------

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.I)


def strip_code_fences(text: str) -> str:
    m = _FENCE_RE.search(text or "")
    return m.group(1).strip() if m else (text or "").strip()


def _as_text(text) -> Optional[str]:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8", "ignore")
        except Exception:
            return None
    if not isinstance(text, str) or not text.strip():
        return None
    return text


def first_json_block(text) -> Dict:
    """Accept dict/str/bytes/None. Return {} on failure."""
    if isinstance(text, dict):
        return text
    text = _as_text(text)
    if text is None:
        return {}
    for candidate in (text, strip_code_fences(text)):
        try:
            data = json.loads(candidate)
            if isinstance(data, dict):
                return data
        except Exception:
            pass
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        try:
            data = json.loads(text[start:end + 1])
            if isinstance(data, dict):
                return data
        except Exception:
            pass
    return {}


def first_json_array(text, keys=("items", "ingredients")) -> Optional[List]:
    """
    Find a JSON array in a model reply. A top-level object is searched for
    the first list under one of ``keys``. Returns None when nothing parses.
    """
    if isinstance(text, list):
        return text
    if isinstance(text, dict):
        data = text
    else:
        text = _as_text(text)
        if text is None:
            return None
        data = None
        for candidate in (text, strip_code_fences(text)):
            try:
                data = json.loads(candidate)
                break
            except Exception:
                continue
        if data is None:
            m = re.search(r"\[[\s\S]*\]", text)
            if m:
                try:
                    data = json.loads(m.group(0))
                except Exception:
                    data = None
        if data is None:
            data = first_json_block(text) or None
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for k in keys:
            if isinstance(data.get(k), list):
                return data[k]
    return None


# ---------- uploads ----------

def allowed_file(filename: str) -> bool:
    """Check if file extension is allowed"""
    return "." in filename and filename.rsplit(".", 1)[1].lower() in current_app.config['ALLOWED_EXTENSIONS']


def gather_images(request_files) -> List:
    """Gather image files from request"""
    if "images[]" in request_files:
        imgs = request_files.getlist("images[]")
    else:
        imgs = request_files.getlist("image")
    return [f for f in imgs if f and f.filename]


def _unique_name(base: str, ext: str) -> str:
    base = secure_filename(base) or "upload"
    return f"{base}-{datetime.utcnow().strftime('%Y%m%d-%H%M%S')}-{uuid.uuid4().hex[:8]}.{ext}"


def save_uploads(files_in: List) -> List[str]:
    """Save uploaded files and return their paths"""
    save_paths: List[str] = []
    upload_dir = current_app.config['UPLOAD_DIR']

    for f in files_in:
        if not allowed_file(f.filename):
            raise ValueError(f"bad_extension:{f.filename}")

        ext = f.filename.rsplit(".", 1)[1].lower()
        path = os.path.join(upload_dir, _unique_name(os.path.splitext(f.filename)[0], ext))
        f.save(path)
        save_paths.append(path)

    return save_paths


def decode_base64_image(data: str) -> bytes:
    """Accept raw base64 or a data: URL. Raises ValueError on bad input."""
    if not isinstance(data, str) or not data.strip():
        raise ValueError("empty_image")
    if data.startswith("data:"):
        data = data.split(",", 1)[-1]
    try:
        return base64.b64decode(data, validate=False)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"bad_base64:{e}")


def save_base64_images(images: List[str]) -> List[str]:
    """Decode base64 images (as sent by the mobile camera), verify them with Pillow, save them."""
    save_paths: List[str] = []
    upload_dir = current_app.config['UPLOAD_DIR']

    for raw in images:
        blob = decode_base64_image(raw)
        try:
            with Image.open(io.BytesIO(blob)) as im:
                fmt = (im.format or "").upper()
        except (UnidentifiedImageError, OSError):
            raise ValueError("bad_image:not an image")
        ext = EXT_BY_FORMAT.get(fmt)
        if not ext or ext not in current_app.config['ALLOWED_EXTENSIONS']:
            raise ValueError(f"bad_extension:{fmt.lower() or 'unknown'}")
        path = os.path.join(upload_dir, _unique_name("camera", ext))
        with open(path, "wb") as f:
            f.write(blob)
        save_paths.append(path)

    return save_paths


def images_from_request(req) -> List[str]:
    """
    Multipart `image`/`images[]` or JSON `image_base64` / `images_base64`.
    Returns saved paths (empty when the request carries no image).
    """
    files_in = gather_images(req.files)
    if files_in:
        return save_uploads(files_in)
    body = req.get_json(silent=True) or {}
    b64 = body.get("images_base64") or body.get("image_base64")
    if isinstance(b64, str):
        b64 = [b64]
    return save_base64_images(b64) if b64 else []


# ---------- generation jobs ----------

def _job_path(job_id: str, suffix: str) -> str:
    return os.path.join(current_app.config['DATA_DIR'], f"{secure_filename(job_id)}.{suffix}.json")


def save_job_manifest(job_id: str, payload: Dict[str, Any]):
    """Save job manifest to file"""
    manifest = {"request": payload, "created_at": datetime.utcnow().isoformat()}
    with open(_job_path(job_id, "job"), "w", encoding="utf-8") as f:
        json.dump(manifest, f, ensure_ascii=False)


def load_job_request(job_id: str) -> Optional[Dict[str, Any]]:
    """Load the stored generation request for a job"""
    p = _job_path(job_id, "job")
    if not os.path.exists(p):
        return None
    with open(p, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data.get("request")


def update_job_partial(job_id: str, phase: str, data: Dict[str, Any]):
    """Merge one streamed phase into the job's partial status file"""
    p = _job_path(job_id, "partial")
    state: Dict[str, Any] = {}
    if os.path.exists(p):
        with open(p, "r", encoding="utf-8") as f:
            state = json.load(f)
    state.update(data or {})
    flags = state.get("flags") or {}
    flags[phase] = True
    state["flags"] = flags
    state["last_phase"] = phase
    with open(p, "w", encoding="utf-8") as f:
        json.dump(state, f, ensure_ascii=False)


def load_job_partial(job_id: str) -> Optional[Dict[str, Any]]:
    p = _job_path(job_id, "partial")
    if not os.path.exists(p):
        return None
    with open(p, "r", encoding="utf-8") as f:
        return json.load(f)


# SSE (Server-Sent Events) helpers
def sse_pack(event: str, obj: Dict[str, Any]) -> str:
    """Pack data for SSE"""
    return f"event: {event}\n" + "data: " + json.dumps(obj, ensure_ascii=False) + "\n\n"


def sse_unpack(frame: str):
    """Inverse of sse_pack for a single frame; (None, None) for comments."""
    ev_name, ev_data = None, None
    for line in frame.splitlines():
        if line.startswith("event: "):
            ev_name = line[len("event: "):].strip()
        elif line.startswith("data: "):
            ev_data = json.loads(line[len("data: "):])
    return ev_name, ev_data


def hb_line(txt: str = "hb") -> str:
    """Create heartbeat line for SSE"""
    return f": {txt}\n\n"


def call_with_heartbeat(fn, *args, interval: float = 15.0):
    """
    Run a blocking function in a thread, yielding heartbeat comments every `interval` seconds.
    Usage inside a generator: res = yield from call_with_heartbeat(lambda: fn(...))
    """
    def _gen():
        box = {"done": False, "res": None, "err": None}

        def worker():
            try:
                box["res"] = fn(*args)
            except Exception as e:
                box["err"] = e
            finally:
                box["done"] = True

        t = threading.Thread(target=worker, daemon=True)
        t.start()

        # Opening padding so intermediaries start streaming immediately
        yield hb_line("open")

        last = 0.0
        while not box["done"]:
            now = time.time()
            if now - last >= interval:
                yield hb_line()  # keepalive
                last = now
            time.sleep(0.05)

        if box["err"]:
            raise box["err"]
        return box["res"]  # captured by 'yield from'

    return _gen()
