# app/lib/json_tools.py
import json
import re

_FENCE_RE = re.compile(r"```(?:json)?", flags=re.IGNORECASE)

def strip_code_fences(text: str) -> str:
    """Drop every ```json / ``` marker, wherever the model put them."""
    return _FENCE_RE.sub("", text or "").strip()

def extract_json_block(text: str) -> str:
    s = strip_code_fences(text)
    try:
        json.loads(s)
        return s
    except ValueError:
        pass
    # chatter around the payload: keep the outermost object, then array
    m = re.search(r"\{.*\}", s, flags=re.DOTALL)
    if m:
        return m.group(0)
    m = re.search(r"\[.*\]", s, flags=re.DOTALL)
    return m.group(0) if m else s
